from .dice import evaluate, flip_coin, roll_from_text
from .errors import DiceError, InvalidNotation, InvalidSides, TooFewDice, TooManyDice
from .formatting import format_result
from .models import Modifiers, RollResult, Threshold

__all__ = [
    "DiceError",
    "InvalidNotation",
    "InvalidSides",
    "Modifiers",
    "RollResult",
    "Threshold",
    "TooFewDice",
    "TooManyDice",
    "evaluate",
    "flip_coin",
    "format_result",
    "roll_from_text",
]
