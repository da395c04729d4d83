from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypeAlias


ThresholdOp: TypeAlias = Literal["<=", ">="]


@dataclass(frozen=True)
class Threshold:
    """A comparison against a fixed face value, used for reroll and success checks."""

    op: ThresholdOp
    value: int

    def matches(self, face: int) -> bool:
        if self.op == "<=":
            return face <= self.value
        return face >= self.value


@dataclass(frozen=True)
class Modifiers:
    explode: bool = False
    keep_high: int | None = None
    keep_low: int | None = None
    drop_high: int | None = None
    drop_low: int | None = None
    reroll: Threshold | None = None
    reroll_once: bool = False
    success: Threshold | None = None


NO_MODIFIERS = Modifiers()


@dataclass(frozen=True)
class ParsedNotation:
    notation: str
    count: int
    # None means Fudge dice.
    sides: int | None
    modifier: int = 0
    modifiers: Modifiers = NO_MODIFIERS

    @property
    def is_fudge(self) -> bool:
        return self.sides is None


@dataclass(frozen=True)
class RollResult:
    rolls: tuple[int, ...]
    total: int
    modifier: int
    modified_total: int
    notation: str
    is_fudge: bool = False
    success_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "notation": self.notation,
            "rolls": list(self.rolls),
            "total": self.total,
            "modifier": self.modifier,
            "modified_total": self.modified_total,
            "is_fudge": self.is_fudge,
            "success_count": self.success_count,
        }
