from __future__ import annotations
from typing import Iterable
from huaybet.types import SUPPORTED_DIGIT_COUNTS
from huaybet.utils.strings import is_digits


def generate_grid(digit_count: int) -> list[str]:
    """Every zero-padded number of `digit_count` digits, ascending. [] for unsupported counts."""
    if not isinstance(digit_count, int) or isinstance(digit_count, bool):
        return []
    if digit_count not in SUPPORTED_DIGIT_COUNTS:
        return []
    return [f"{i:0{digit_count}d}" for i in range(10 ** digit_count)]


def group_by_leading_hundred(numbers: Iterable[str]) -> dict[str, list[str]]:
    """Split a 3-digit grid into tabs "000", "100", ..., "900".

    Tabs come out in ascending order; members keep their input order. Anything that is not a
    3-digit string raises ValueError, since the tab key would be meaningless.
    """
    grouped: dict[str, list[str]] = {}
    for num in numbers:
        if len(num) != 3 or not is_digits(num):
            raise ValueError(f"Expected a 3-digit number, got {num!r}")
        grouped.setdefault(num[0] + "00", []).append(num)
    return {k: grouped[k] for k in sorted(grouped)}


def filter_by_substring(numbers: list[str], query: str) -> list[str]:
    if not query:
        return numbers
    return [n for n in numbers if query in n]
