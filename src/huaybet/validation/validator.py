from __future__ import annotations
from decimal import Decimal
from typing import Iterable
from huaybet.registry.bet_types import BetTypeRegistry
from huaybet.types import BetLine, BetType, UnknownBetType
from huaybet.utils.strings import is_digits


class Validator:
    """Checks a candidate bet against the registry and against the lines already in a slip.

    Every check answers True/False; bad interactive input is never an exception here.
    """

    def __init__(self, registry: BetTypeRegistry) -> None:
        self.registry = registry

    def validate_length(self, number: str, bet_type: BetType | str) -> bool:
        try:
            desc = self.registry.get(bet_type)
        except UnknownBetType:
            return False
        return len(number) == desc.digit_count

    def has_conflict(self, candidate: BetType | str, selected: Iterable[BetType | str]) -> bool:
        conflicts = self.registry.conflicts_for(candidate)
        if not conflicts:
            return False
        for s in selected:
            try:
                if BetType.from_wire(s) in conflicts:
                    return True
            except UnknownBetType:
                continue
        return False

    def is_duplicate(self, number: str, bet_type: BetType | str, slip: Iterable[BetLine]) -> bool:
        # numbers compare as strings, so "05" != "5"
        try:
            key = (number, BetType.from_wire(bet_type))
        except UnknownBetType:
            return False
        return any(line.key == key for line in slip)

    def validate_stake(self, bet_type: BetType | str, stake: Decimal | int | float | str) -> bool:
        try:
            desc = self.registry.get(bet_type)
            return desc.accepts_stake(stake)
        except (UnknownBetType, ValueError):
            return False

    def rejection_reason(
        self,
        number: str,
        bet_type: BetType | str,
        stake: Decimal | int | float | str,
        slip: Iterable[BetLine],
    ) -> str | None:
        """None if the line may be added to the slip, else a short reason code."""
        if bet_type not in self.registry:
            return "unknown_bet_type"
        if not self.validate_length(number, bet_type):
            return "bad_length"
        if not is_digits(number):
            return "not_digits"
        lines = list(slip)
        if self.has_conflict(bet_type, {line.bet_type for line in lines}):
            return "conflict"
        if self.is_duplicate(number, bet_type, lines):
            return "duplicate"
        if not self.validate_stake(bet_type, stake):
            return "stake_out_of_range"
        return None
