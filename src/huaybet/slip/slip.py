from __future__ import annotations
from decimal import Decimal
from typing import Iterable, Iterator
import pandas as pd
from huaybet.logging import get_logger
from huaybet.registry.bet_types import BetTypeRegistry
from huaybet.slip.totals import SlipTotals, compute_totals
from huaybet.types import BetLine, BetType
from huaybet.validation.validator import Validator

log = get_logger(__name__)

COLS = ["number", "bet_type", "label", "stake", "multiplier", "potential_win"]


class BetRejected(ValueError):
    def __init__(self, number: str, bet_type: BetType | str, reason: str) -> None:
        super().__init__(f"Cannot add {number} ({bet_type}): {reason}")
        self.number = number
        self.bet_type = bet_type
        self.reason = reason


class Slip:
    """The in-progress bet slip (cart). No two lines share a (number, bet_type) pair.

    Not thread-safe; a slip belongs to the session that created it.
    """

    def __init__(self, registry: BetTypeRegistry) -> None:
        self._registry = registry
        self._validator = Validator(registry)
        self._lines: list[BetLine] = []

    @property
    def registry(self) -> BetTypeRegistry:
        return self._registry

    @property
    def validator(self) -> Validator:
        return self._validator

    @property
    def lines(self) -> tuple[BetLine, ...]:
        return tuple(self._lines)

    def add(self, number: str, bet_type: BetType | str, stake: Decimal | int | float | str) -> BetLine:
        reason = self.validator.rejection_reason(number, bet_type, stake, self._lines)
        if reason is not None:
            log.debug("Rejected %s (%s) stake=%s: %s", number, bet_type, stake, reason)
            raise BetRejected(number, bet_type, reason)
        desc = self.registry.get(bet_type)
        line = BetLine(number=number, bet_type=desc.bet_type, stake=stake, multiplier=desc.multiplier)
        self._lines.append(line)
        return line

    def add_many(
        self, numbers: Iterable[str], bet_type: BetType | str, stake: Decimal | int | float | str
    ) -> list[BetLine]:
        """Add generated numbers in one go; numbers already on the slip are skipped.

        Any other rejection (wrong length, stake out of range, ...) still raises.
        """
        added = []
        for n in numbers:
            if self.validator.is_duplicate(n, bet_type, self._lines):
                continue
            added.append(self.add(n, bet_type, stake))
        return added

    def remove(self, number: str, bet_type: BetType | str) -> bool:
        for i, line in enumerate(self._lines):
            if self.validator.is_duplicate(number, bet_type, [line]):
                del self._lines[i]
                return True
        return False

    def clear(self) -> None:
        self._lines.clear()

    def totals(self) -> SlipTotals:
        return compute_totals(self._lines)

    def to_frame(self) -> pd.DataFrame:
        rows = [
            {
                "number": line.number,
                "bet_type": line.bet_type.value,
                "label": self.registry.get(line.bet_type).label,
                "stake": line.stake,
                "multiplier": line.multiplier,
                "potential_win": line.potential_win,
            }
            for line in self._lines
        ]
        return pd.DataFrame(rows, columns=COLS)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[BetLine]:
        return iter(list(self._lines))
