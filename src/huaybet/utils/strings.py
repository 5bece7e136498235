from __future__ import annotations
from decimal import Decimal, InvalidOperation


def is_digits(s: str) -> bool:
    # str.isdigit() also accepts things like "²"
    return bool(s) and all(ch in "0123456789" for ch in s)


def pad_number(x: str | int, length: int) -> str:
    s = str(x).strip()
    if not is_digits(s):
        raise ValueError(f"Not numeric: {x}")
    return s.zfill(length)


def as_amount(x: Decimal | int | float | str) -> Decimal:
    """Convert a stake or multiplier to Decimal without binary float noise (3.2 -> Decimal("3.2"))."""
    if isinstance(x, bool):
        raise ValueError(f"Not an amount: {x!r}")
    if isinstance(x, Decimal):
        d = x
    else:
        try:
            d = Decimal(str(x).strip())
        except InvalidOperation as e:
            raise ValueError(f"Not an amount: {x!r}") from e
    if not d.is_finite():
        raise ValueError(f"Not an amount: {x!r}")
    return d
