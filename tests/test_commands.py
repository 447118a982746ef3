from __future__ import annotations

import pytest

from game.commands import parse_choice, parse_item_choice


@pytest.mark.parametrize(
    "raw, expected",
    [("1", 1), ("8", 8), (" 3 ", 3), ("+2", 2), ("04", 4)],
)
def test_valid_choices(raw, expected):
    parsed = parse_choice(raw, 8)

    assert parsed.ok
    assert parsed.value == expected


@pytest.mark.parametrize(
    "raw, error",
    [
        ("", "Please enter a number!"),
        ("   ", "Please enter a number!"),
        ("abc", "That's not a number!"),
        ("3abc", "That's not a number!"),
        ("2.5", "That's not a number!"),
        ("0", "Please enter a number between 1 and 8."),
        ("9", "Please enter a number between 1 and 8."),
        ("-1", "Please enter a number between 1 and 8."),
    ],
)
def test_invalid_choices(raw, error):
    parsed = parse_choice(raw, 8)

    assert not parsed.ok
    assert parsed.value is None
    assert parsed.error == error


@pytest.mark.parametrize("raw", ["cancel", "CANCEL", " Cancel "])
def test_item_choice_cancel(raw):
    parsed = parse_item_choice(raw, 3)

    assert parsed.cancelled
    assert not parsed.ok


def test_item_choice_is_zero_based():
    parsed = parse_item_choice("2", 3)

    assert parsed.ok
    assert parsed.value == 1


@pytest.mark.parametrize("raw", ["0", "4", "", "sword", "-2"])
def test_item_choice_rejects_bad_positions(raw):
    parsed = parse_item_choice(raw, 3)

    assert not parsed.ok
    assert not parsed.cancelled
    assert parsed.error == "Invalid item number!"
