from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable
from huaybet.types import BetLine
from huaybet.utils.strings import as_amount


@dataclass(frozen=True)
class SlipTotals:
    total_stake: Decimal
    total_potential_win: Decimal


def potential_win(stake: Decimal | int | float | str, multiplier: Decimal | int | float | str) -> Decimal:
    s = as_amount(stake)
    m = as_amount(multiplier)
    if s < 0 or m < 0:
        raise ValueError(f"stake and multiplier must be >= 0, got {s} x {m}")
    return s * m


def compute_totals(lines: Iterable[BetLine]) -> SlipTotals:
    """Sum stakes and stake x multiplier over the lines. Amounts are not rounded."""
    total_stake = Decimal("0")
    total_win = Decimal("0")
    for line in lines:
        total_stake += line.stake
        total_win += potential_win(line.stake, line.multiplier)
    return SlipTotals(total_stake=total_stake, total_potential_win=total_win)
