"""Amount validation and parsing for RMB capitalization.

An amount is plain text: one or more ASCII digits, optionally followed by a
decimal point and one or two fractional digits. No sign, no whitespace, no
grouping separators.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


# fullmatch() so a trailing newline is rejected too
_AMOUNT_RE = re.compile(r"[0-9]+(?:\.[0-9]{1,2})?")


class AmountError(ValueError):
    """Base class for amounts that cannot be capitalized."""


class InvalidInput(AmountError):
    """Raised when text does not denote a valid amount."""


class EmptyInput(InvalidInput):
    """Raised when no amount text was supplied."""

    def __init__(self) -> None:
        super().__init__("Amount is required, e.g. 1234.56")


class MalformedAmount(InvalidInput):
    """Raised when text fails the amount pattern."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid amount {text!r}, expected a number like 1234.56")
        self.text = text


class AmountTooLarge(AmountError):
    """Raised when the integer part goes beyond the 兆 group."""

    def __init__(self, digits: int, limit: int) -> None:
        super().__init__(f"Integer part has {digits} digits, at most {limit} are supported")
        self.digits = digits
        self.limit = limit


@dataclass(frozen=True)
class Amount:
    integer: str        # digit string, may carry leading zeros
    fraction: str = ""  # "" when no decimal point was given


def is_valid_amount(text) -> bool:
    """Return True if text is a non-negative amount with at most two decimals."""
    return isinstance(text, str) and _AMOUNT_RE.fullmatch(text) is not None


def parse_amount(text: str) -> Amount:
    """Split validated text into its integer and fractional digit strings.

    Raises EmptyInput for "" and MalformedAmount for anything else the
    validator rejects.
    """
    if text == "":
        raise EmptyInput()
    if not is_valid_amount(text):
        raise MalformedAmount(text)

    integer, _, fraction = text.partition(".")
    return Amount(integer=integer, fraction=fraction)


def sanitize_amount(text: str) -> str:
    """Filter free-form text the way the amount input box does while typing.

    - Keep ASCII digits and '.' only.
    - Keep the first decimal point, drop the rest.
    - Cut the fractional part to two digits.

    The result may still be invalid ("", ".", "5."), so validate afterwards.
    """
    kept = re.sub(r"[^0-9.]", "", text)

    integer, dot, rest = kept.partition(".")
    fraction = rest.replace(".", "")[:2]
    return f"{integer}{dot}{fraction}"
