"""Input validation for menu and item prompts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


CANCEL_WORDS = {"cancel", "c", "back"}


@dataclass(frozen=True)
class ParsedChoice:
    """Outcome of validating one line of input.

    Exactly one of `value` or `error` is set, unless `cancelled` is true.
    """

    value: Optional[int] = None
    error: Optional[str] = None
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and not self.cancelled


def _parse_int(text: str) -> Optional[int]:
    sign = ""
    digits = text
    if digits[:1] in {"+", "-"}:
        sign, digits = digits[:1], digits[1:]
    if not digits.isdecimal():
        return None
    return int(sign + digits)


def parse_choice(raw: str, max_choice: int) -> ParsedChoice:
    """Validate a menu choice in [1, max_choice]."""
    text = raw.strip()
    if not text:
        return ParsedChoice(error="Please enter a number!")

    number = _parse_int(text)
    if number is None:
        return ParsedChoice(error="That's not a number!")

    if number < 1 or number > max_choice:
        return ParsedChoice(error=f"Please enter a number between 1 and {max_choice}.")

    return ParsedChoice(value=number)


def parse_item_choice(raw: str, item_count: int) -> ParsedChoice:
    """Validate an inventory pick; returns a zero-based index on success."""
    text = raw.strip().lower()
    if text in CANCEL_WORDS:
        return ParsedChoice(cancelled=True)

    number = _parse_int(text) if text else None
    if number is None or number < 1 or number > item_count:
        return ParsedChoice(error="Invalid item number!")

    return ParsedChoice(value=number - 1)
