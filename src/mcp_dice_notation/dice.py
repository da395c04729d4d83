from __future__ import annotations

import logging
import secrets
from typing import Literal, Protocol

from .errors import DiceError
from .models import Modifiers, RollResult
from .parser import parse_notation


logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


CoinSide = Literal["Heads", "Tails"]


def _default_rng() -> RandomSource:
    return secrets.SystemRandom()


def roll_one(sides: int, modifiers: Modifiers, rng: RandomSource) -> int:
    """Roll a single die in [1, sides], honouring the reroll threshold."""

    value = rng.randint(1, sides)
    reroll = modifiers.reroll
    if reroll is None:
        return value

    # A threshold that rejects both extremes would never settle.
    if reroll.matches(1) and reroll.matches(sides):
        logger.debug("Reroll %s%d rejects every face of d%d, keeping %d", reroll.op, reroll.value, sides, value)
        return value

    while reroll.matches(value):
        value = rng.randint(1, sides)
        if modifiers.reroll_once:
            break

    return value


def explode(values: list[int], sides: int, modifiers: Modifiers, rng: RandomSource) -> list[int]:
    """Return ``values`` followed by every extra die triggered by max-face results.

    Only the dice produced by the previous pass are checked in the next one.
    """

    result = list(values)
    if sides < 2:
        return result

    pending = values
    passes = 0
    while pending:
        fresh = [roll_one(sides, modifiers, rng) for v in pending if v == sides]
        result.extend(fresh)
        pending = fresh
        passes += 1

    logger.debug("Explosion on d%d finished after %d passes, %d extra dice", sides, passes, len(result) - len(values))
    return result


def apply_keep_drop(values: list[int], modifiers: Modifiers) -> list[int]:
    """Sort ascending and apply drop-low, drop-high, keep-low, keep-high in that order."""

    kept = sorted(values)

    if modifiers.drop_low is not None:
        kept = kept[modifiers.drop_low :]
    if modifiers.drop_high is not None:
        kept = kept[: max(len(kept) - modifiers.drop_high, 0)]
    if modifiers.keep_low is not None:
        kept = kept[: modifiers.keep_low]
    if modifiers.keep_high is not None:
        kept = kept[max(len(kept) - modifiers.keep_high, 0) :]

    return kept


def roll_pool(count: int, sides: int, modifiers: Modifiers, rng: RandomSource) -> list[int]:
    rolls = [roll_one(sides, modifiers, rng) for _ in range(count)]
    if modifiers.explode:
        rolls = explode(rolls, sides, modifiers, rng)
    return apply_keep_drop(rolls, modifiers)


def roll_fudge(count: int, rng: RandomSource) -> list[int]:
    return [rng.randint(-1, 1) for _ in range(count)]


def evaluate(text: str, max_dice: int, rng: RandomSource | None = None) -> RollResult:
    """Parse, validate, then roll. Raises DiceError for invalid input."""

    parsed = parse_notation(text, max_dice)
    rng = rng or _default_rng()

    if parsed.sides is None:
        rolls = roll_fudge(parsed.count, rng)
        total = sum(rolls)
        return RollResult(
            rolls=tuple(rolls),
            total=total,
            modifier=parsed.modifier,
            modified_total=total + parsed.modifier,
            notation=parsed.notation,
            is_fudge=True,
        )

    modifiers = parsed.modifiers
    rolls = roll_pool(parsed.count, parsed.sides, modifiers, rng)

    success_count = None
    if modifiers.success is not None:
        success_count = sum(1 for r in rolls if modifiers.success.matches(r))
        total = success_count
    else:
        total = sum(rolls)

    return RollResult(
        rolls=tuple(rolls),
        total=total,
        modifier=parsed.modifier,
        modified_total=total + parsed.modifier,
        notation=parsed.notation,
        success_count=success_count,
    )


def roll_from_text(text: str, max_dice: int, rng: RandomSource | None = None) -> RollResult | str:
    """Evaluate a notation, returning the user-facing message instead of raising."""

    try:
        result = evaluate(text, max_dice, rng)
    except DiceError as e:
        logger.info("Rejected dice notation %r: [%s] %s", text, e.code, e)
        return str(e)

    logger.info("Rolled %s: total=%d modified_total=%d", result.notation, result.total, result.modified_total)
    return result


def flip_coin(rng: RandomSource | None = None) -> CoinSide:
    rng = rng or _default_rng()
    return "Heads" if rng.randint(0, 1) == 0 else "Tails"
