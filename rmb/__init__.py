"""rmb: capitalize RMB amounts as Chinese financial numerals."""

from __future__ import annotations

from .amount import (
    Amount,
    AmountError,
    AmountTooLarge,
    EmptyInput,
    InvalidInput,
    MalformedAmount,
    is_valid_amount,
    parse_amount,
    sanitize_amount,
)
from .numerals import convert_to_chinese


__all__ = [
    "Amount",
    "AmountError",
    "AmountTooLarge",
    "EmptyInput",
    "InvalidInput",
    "MalformedAmount",
    "is_valid_amount",
    "parse_amount",
    "sanitize_amount",
    "convert_to_chinese",
]
