import pytest

from mcp_dice_notation.dice import evaluate
from mcp_dice_notation.models import Modifiers, Threshold
from mcp_dice_notation.parser import parse_modifiers


@pytest.mark.parametrize(
    ("suffix", "expected"),
    [
        ("", Modifiers()),
        (None, Modifiers()),
        ("!", Modifiers(explode=True)),
        ("d2", Modifiers(drop_low=2)),
        ("dl3", Modifiers(drop_low=3)),
        ("dh1", Modifiers(drop_high=1)),
        ("k3", Modifiers(keep_high=3)),
        ("kh2", Modifiers(keep_high=2)),
        ("kl2", Modifiers(keep_low=2)),
        ("r<2", Modifiers(reroll=Threshold("<=", 2))),
        ("r>5", Modifiers(reroll=Threshold(">=", 5))),
        ("ro<1", Modifiers(reroll=Threshold("<=", 1), reroll_once=True)),
        (">7", Modifiers(success=Threshold(">=", 7))),
        ("<3", Modifiers(success=Threshold("<=", 3))),
        (
            "!k3r<1>5",
            Modifiers(explode=True, keep_high=3, reroll=Threshold("<=", 1), success=Threshold(">=", 5)),
        ),
        ("dl1kh1", Modifiers(drop_low=1, keep_high=1)),
    ],
)
def test_tokens(suffix, expected):
    assert parse_modifiers(suffix) == expected


@pytest.mark.parametrize(
    ("suffix", "expected"),
    [
        ("xyz!", Modifiers(explode=True)),
        ("d", Modifiers()),
        ("dl", Modifiers()),
        ("k!", Modifiers(explode=True)),
        ("ro", Modifiers()),
        ("r=3", Modifiers()),
        ("dr<2", Modifiers(reroll=Threshold("<=", 2))),
        ("??k2??", Modifiers(keep_high=2)),
        ("K2", Modifiers()),
    ],
)
def test_unrecognised_characters_are_skipped(suffix, expected):
    assert parse_modifiers(suffix) == expected


def test_later_token_overwrites_earlier():
    assert parse_modifiers("k1k3").keep_high == 3
    assert parse_modifiers(">3>8").success == Threshold(">=", 8)

    mods = parse_modifiers("ro<2r<3")
    assert mods.reroll == Threshold("<=", 3)
    assert mods.reroll_once is False


def test_threshold_matching():
    assert Threshold("<=", 2).matches(2)
    assert not Threshold("<=", 2).matches(3)
    assert Threshold(">=", 7).matches(7)
    assert not Threshold(">=", 7).matches(6)


@pytest.mark.parametrize(
    ("suffix", "expected"),
    [
        ("k" + "9" * 5000, Modifiers()),
        ("d" + "9" * 5000 + "!", Modifiers(explode=True)),
        ("ro<" + "9" * 5000 + "kl2", Modifiers(keep_low=2)),
        (">" + "9" * 5000, Modifiers()),
        ("k0003", Modifiers(keep_high=3)),
    ],
)
def test_oversized_digit_runs_are_skipped(suffix, expected):
    assert parse_modifiers(suffix) == expected


def test_oversized_keep_in_full_roll(scripted):
    result = evaluate("2d6k" + "9" * 5000, 100, scripted([2, 5]))
    assert result.rolls == (2, 5)
