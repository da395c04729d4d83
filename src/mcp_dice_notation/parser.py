from __future__ import annotations

import re
from typing import Any

from .errors import InvalidNotation, InvalidSides, TooFewDice, TooManyDice
from .models import Modifiers, ParsedNotation, Threshold


# XdY[+/-Z][meta-modifiers]
NOTATION_RE = re.compile(
    r"^(?P<count>\d+)d(?P<sides>\d+|F)(?P<mod>[+-]\d+)?(?P<meta>\S*)$",
    re.IGNORECASE,
)

_DROP_RE = re.compile(r"d(?P<side>[lh])?(?P<n>\d+)")
_KEEP_RE = re.compile(r"k(?P<side>[lh])?(?P<n>\d+)")
_REROLL_RE = re.compile(r"r(?P<once>o)?(?P<cmp>[<>])(?P<n>\d+)")
_SUCCESS_RE = re.compile(r"(?P<cmp>[<>])(?P<n>\d+)")

# Longer digit runs are never a meaningful face, count or bonus.
_MAX_FIELD_DIGITS = 9


def _bounded_int(digits: str) -> int | None:
    significant = digits.lstrip("0")
    if len(significant) > _MAX_FIELD_DIGITS:
        return None
    return int(significant or "0")


def _threshold(marker: str, value: int) -> Threshold:
    return Threshold(op="<=" if marker == "<" else ">=", value=value)


def parse_modifiers(suffix: str | None) -> Modifiers:
    """Scan the meta-modifier suffix left to right.

    Characters that do not start a complete token are skipped one at a time,
    so a typo never fails the roll. A repeated token overwrites the earlier one.
    """

    fields: dict[str, Any] = {}
    if not suffix:
        return Modifiers()

    pos = 0
    while pos < len(suffix):
        ch = suffix[pos]

        if ch == "!":
            fields["explode"] = True
            pos += 1
            continue

        m = None
        if ch == "d":
            m = _DROP_RE.match(suffix, pos)
        elif ch == "k":
            m = _KEEP_RE.match(suffix, pos)
        elif ch == "r":
            m = _REROLL_RE.match(suffix, pos)
        elif ch in "<>":
            m = _SUCCESS_RE.match(suffix, pos)

        value = _bounded_int(m.group("n")) if m else None
        if m is None or value is None:
            pos += 1
            continue

        if ch == "d":
            fields["drop_high" if m.group("side") == "h" else "drop_low"] = value
        elif ch == "k":
            fields["keep_low" if m.group("side") == "l" else "keep_high"] = value
        elif ch == "r":
            fields["reroll_once"] = m.group("once") == "o"
            fields["reroll"] = _threshold(m.group("cmp"), value)
        else:
            fields["success"] = _threshold(m.group("cmp"), value)

        pos = m.end()

    return Modifiers(**fields)


def parse_notation(text: str, max_dice: int) -> ParsedNotation:
    """Match and validate a notation string. Raises DiceError subclasses."""

    notation = text.strip() if text else ""
    m = NOTATION_RE.match(notation)
    if not m:
        raise InvalidNotation()

    count_digits = m.group("count").lstrip("0")
    if len(count_digits) > len(str(max_dice)):
        raise TooManyDice(max_dice)
    count = int(count_digits or "0")
    if count > max_dice:
        raise TooManyDice(max_dice)
    if count < 1:
        raise TooFewDice()

    modifier = 0
    if m.group("mod"):
        magnitude = _bounded_int(m.group("mod")[1:])
        if magnitude is None:
            raise InvalidNotation()
        modifier = -magnitude if m.group("mod")[0] == "-" else magnitude

    sides_str = m.group("sides")
    if sides_str.lower() == "f":
        sides = None
    else:
        sides = _bounded_int(sides_str)
        if sides is None:
            raise InvalidNotation()
        if sides < 2:
            raise InvalidSides()

    return ParsedNotation(
        notation=notation,
        count=count,
        sides=sides,
        modifier=modifier,
        modifiers=parse_modifiers(m.group("meta")),
    )
