"""Spell non-negative integers as English words.

Used as the default word source: the command line places the spelled-out
numbers ``start .. start + count - 1`` when no explicit words are given.
"""

from __future__ import annotations

from typing import List

from ..core.exceptions import InvalidInputError

ONES = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
TENS = (
    "zero", "ten", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)
ORDERS = ("thousand", "million", "billion", "trillion", "quadrillion", "quintillion")

MAX_NUMBER = 2**64 - 1


def encode(num: int) -> str:
    """Return the English spelling of ``num``, e.g. ``"one hundred twenty-one"``."""

    if isinstance(num, bool) or not isinstance(num, int) or num < 0 or num > MAX_NUMBER:
        raise InvalidInputError(f"Can only spell integers between 0 and {MAX_NUMBER}, got {num!r}")
    if num < 20:
        return ONES[num]
    if num < 100:
        upper, lower = divmod(num, 10)
        if lower == 0:
            return TENS[upper]
        return f"{TENS[upper]}-{encode(lower)}"
    if num < 1000:
        return _format_order(num, 100, "hundred")

    div = 1000
    order = ORDERS[0]
    for order in ORDERS:
        if div * 1000 > num:
            break
        div *= 1000
    return _format_order(num, div, order)


def _format_order(num: int, div: int, order: str) -> str:
    upper, lower = divmod(num, div)
    if lower == 0:
        return f"{encode(upper)} {order}"
    return f"{encode(upper)} {order} {encode(lower)}"


def spell_range(start: int, count: int) -> List[str]:
    """Spell ``count`` consecutive numbers beginning at ``start``."""

    if count < 0:
        raise InvalidInputError(f"Count must not be negative, got {count}")
    return [encode(num) for num in range(start, start + count)]


__all__ = ["encode", "spell_range", "MAX_NUMBER"]
