from __future__ import annotations
from huaybet.utils.strings import is_digits

DIGITS = "0123456789"


def _single_digit(d: str) -> bool:
    return len(d) == 1 and is_digits(d)


def gate_19(d: str) -> list[str]:
    """19 ประตู: every 2-digit number with d in front or behind. dd is listed once."""
    if not _single_digit(d):
        return []
    return sorted({d + x for x in DIGITS} | {x + d for x in DIGITS})


def doubles() -> list[str]:
    return [x + x for x in DIGITS]


def leading_run(d: str) -> list[str]:
    """รูดหน้า: d0..d9."""
    if not _single_digit(d):
        return []
    return [d + x for x in DIGITS]


def trailing_run(d: str) -> list[str]:
    """รูดหลัง: 0d..9d."""
    if not _single_digit(d):
        return []
    return [x + d for x in DIGITS]


def low_half() -> list[str]:
    return [f"{i:02d}" for i in range(0, 50)]


def high_half() -> list[str]:
    return [f"{i:02d}" for i in range(50, 100)]


def evens() -> list[str]:
    return [f"{i:02d}" for i in range(0, 100, 2)]


def odds() -> list[str]:
    return [f"{i:02d}" for i in range(1, 100, 2)]


# names used by the betting pages
rood_nha = leading_run
rood_lung = trailing_run
