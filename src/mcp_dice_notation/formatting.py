from __future__ import annotations

from .dice import CoinSide
from .models import RollResult


SUMMARY_PHRASE = "a handful of dice"


def _fudge_face(value: int) -> str:
    if value > 0:
        return "+"
    if value < 0:
        return "-"
    return "0"


def _join_rolls(rolls: tuple[int, ...]) -> str:
    if len(rolls) > 2:
        return ", ".join(str(r) for r in rolls[:-1]) + f", and {rolls[-1]}"
    if len(rolls) == 2:
        return f"{rolls[0]} and {rolls[1]}"
    # Everything may have been dropped.
    return str(rolls[0]) if rolls else "0"


def format_rolls(result: RollResult, show_threshold: int) -> str:
    if result.is_fudge:
        return ", ".join(_fudge_face(r) for r in result.rolls)
    if len(result.rolls) <= show_threshold:
        return _join_rolls(result.rolls)
    return SUMMARY_PHRASE


def format_result(result: RollResult, show_threshold: int) -> str:
    """Render a roll as the narration sent back to the caller."""

    rolls_display = format_rolls(result, show_threshold)

    if result.success_count is not None:
        if len(result.rolls) == 1:
            response = f"I rolled a {'success' if result.success_count == 1 else 'failure'}."
        else:
            noun = "success" if result.success_count == 1 else "successes"
            response = f"I rolled {rolls_display}, making **{result.success_count} {noun}**."
    elif len(result.rolls) == 1:
        response = f"I rolled a **{result.total}**."
    else:
        response = f"I rolled {rolls_display}, making **{result.total}**."

    if result.modifier != 0:
        op = "+" if result.modifier > 0 else "-"
        response += (
            f" With the modifier, {result.total} {op} {abs(result.modifier)} = **{result.modified_total}**."
        )

    return response


def format_coin(side: CoinSide) -> str:
    emoji = "🪙" if side == "Heads" else "💰"
    return f"{emoji} **{side}!**"
