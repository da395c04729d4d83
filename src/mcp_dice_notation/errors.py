from __future__ import annotations


class DiceError(ValueError):
    """User-facing validation errors (fail-fast, no roll performed)."""

    code = "DICE_ERROR"


class InvalidNotation(DiceError):
    code = "INVALID_NOTATION"

    def __init__(self) -> None:
        super().__init__(
            "Invalid dice notation. Use format like `2d6`, `4d6+2`, `2d20k1`, or `4dF`."
        )


class TooManyDice(DiceError):
    code = "TOO_MANY_DICE"

    def __init__(self, max_dice: int) -> None:
        self.max_dice = max_dice
        super().__init__(f"I'm not going to roll more than {max_dice} dice for you.")


class TooFewDice(DiceError):
    code = "TOO_FEW_DICE"

    def __init__(self) -> None:
        super().__init__("You need to roll at least one die.")


class InvalidSides(DiceError):
    code = "INVALID_SIDES"

    def __init__(self) -> None:
        super().__init__("You want to roll dice with less than two sides. Wow.")
