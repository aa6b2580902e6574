"""Render RMB amounts as capitalized Chinese numerals (大写金额).

Example: "1234.56" -> "人民币壹仟贰佰叁拾肆元伍角陆分"
"""

from __future__ import annotations

from .amount import AmountTooLarge, parse_amount


# Financial uppercase numerals used on invoices and cheques
_DIGITS_UPPER = ("零", "壹", "贰", "叁", "肆", "伍", "陆", "柒", "捌", "玖")

# Units inside a 4-digit group, indexed by distance from the group's last digit
_UNIT_WITHIN_GROUP = ("", "拾", "佰", "仟")  # ones, tens, hundreds, thousands
_GROUP_UNITS = ("", "万", "亿", "兆")
_FRACTION_UNITS = ("角", "分")  # tenths, hundredths

PREFIX = "人民币"
CURRENCY_UNIT = "元"
WHOLE = "整"

MAX_INTEGER_DIGITS = 4 * len(_GROUP_UNITS)


def convert_to_chinese(amount: str) -> str:
    """Convert a validated amount string to its capitalized form.

    Raises EmptyInput/MalformedAmount for text the validator rejects and
    AmountTooLarge when the integer part needs a group above 兆.
    """
    parsed = parse_amount(amount)
    return PREFIX + _integer_to_upper(parsed.integer) + _fraction_to_upper(parsed.fraction)


def _integer_to_upper(integer: str) -> str:
    """Render the integer digits followed by 元.

    Runs of zeros collapse into a single 零 written just before the next
    non-zero digit. A group unit is written at the end of each group unless
    the zero run covers the whole group. Leading zeros are scanned like any
    other zero run, so "0012" renders 零壹拾贰元.
    """
    if not integer.strip("0"):
        return _DIGITS_UPPER[0] + CURRENCY_UNIT

    if len(integer) > MAX_INTEGER_DIGITS:
        raise AmountTooLarge(len(integer), MAX_INTEGER_DIGITS)

    parts: list[str] = []
    zero_count = 0
    length = len(integer)
    for i, ch in enumerate(integer):
        p = length - i - 1
        group, pos = divmod(p, 4)

        if ch == "0":
            zero_count += 1
        else:
            if zero_count > 0:
                parts.append(_DIGITS_UPPER[0])
            zero_count = 0
            parts.append(_DIGITS_UPPER[int(ch)] + _UNIT_WITHIN_GROUP[pos])

        # Last digit of a group: close it unless all four digits were skipped
        if pos == 0 and zero_count < 4:
            parts.append(_GROUP_UNITS[group])

    parts.append(CURRENCY_UNIT)
    return "".join(parts)


def _fraction_to_upper(fraction: str) -> str:
    """Render 角/分, or 整 when there is nothing after the decimal point."""
    if not fraction.strip("0"):
        return WHOLE

    parts: list[str] = []
    for i, ch in enumerate(fraction[:2]):
        if ch != "0":
            parts.append(_DIGITS_UPPER[int(ch)] + _FRACTION_UNITS[i])
        elif i == 0 and fraction[1:2] not in ("", "0"):
            # 0 角 followed by some 分: mark the skipped place
            parts.append(_DIGITS_UPPER[0])
    return "".join(parts)
