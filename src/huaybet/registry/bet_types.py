from __future__ import annotations
from dataclasses import replace
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Iterator, Mapping
import pandas as pd
from huaybet.config import CFG
from huaybet.logging import get_logger
from huaybet.registry.defaults import DEFAULT_BET_TYPES, DEFAULT_CONFLICTS
from huaybet.types import BetType, BetTypeDescriptor, UnknownBetType
from huaybet.utils.strings import as_amount

log = get_logger(__name__)

REQUIRED_COLS = ["id", "label", "digit_count", "multiplier", "min_stake", "max_stake"]


class BetTypeRegistry:
    """Read-only lookup from bet type to its descriptor and its conflicting bet types.

    Built once from configuration and passed to whatever needs it; a malformed table
    raises ValueError here rather than on each lookup.
    """

    def __init__(
        self,
        descriptors: Mapping[BetType | str, BetTypeDescriptor],
        conflicts: Mapping[BetType | str, Iterable[BetType | str]] | None = None,
    ) -> None:
        table: dict[BetType, BetTypeDescriptor] = {}
        for key, desc in descriptors.items():
            bt = BetType.from_wire(key)
            if desc.bet_type != bt:
                raise ValueError(f"Descriptor for {bt} is keyed as {desc.bet_type}")
            table[bt] = desc
        self._descriptors = table

        rules: dict[BetType, frozenset[BetType]] = {}
        for key, others in (conflicts or {}).items():
            bt = self._known(key)
            other_types = frozenset(self._known(o) for o in others)
            if bt in other_types:
                raise ValueError(f"{bt} cannot conflict with itself")
            if other_types:
                rules[bt] = other_types
        self._conflicts = rules

    def _known(self, key: BetType | str) -> BetType:
        bt = BetType.from_wire(key)
        if bt not in self._descriptors:
            raise ValueError(f"Conflict rule references unconfigured bet type: {key}")
        return bt

    def get(self, bet_type: BetType | str) -> BetTypeDescriptor:
        bt = BetType.from_wire(bet_type)
        try:
            return self._descriptors[bt]
        except KeyError:
            raise UnknownBetType(bet_type) from None

    def conflicts_for(self, bet_type: BetType | str) -> frozenset[BetType]:
        try:
            bt = BetType.from_wire(bet_type)
        except UnknownBetType:
            return frozenset()
        return self._conflicts.get(bt, frozenset())

    def bet_types(self) -> list[BetType]:
        return list(self._descriptors)

    def with_multipliers(self, overrides: Mapping[BetType | str, Decimal | int | float | str]) -> BetTypeRegistry:
        """Return a copy with payout multipliers replaced, e.g. per-lottery rates from the backend."""
        table = dict(self._descriptors)
        for key, mult in overrides.items():
            desc = self.get(key)
            table[desc.bet_type] = replace(desc, multiplier=as_amount(mult))
        return BetTypeRegistry(table, self._conflicts)

    def __contains__(self, bet_type: object) -> bool:
        try:
            return BetType.from_wire(bet_type) in self._descriptors  # type: ignore[arg-type]
        except UnknownBetType:
            return False

    def __iter__(self) -> Iterator[BetTypeDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)


def default_registry() -> BetTypeRegistry:
    descriptors = {
        bt: BetTypeDescriptor(bt, label, digits, mult, lo, hi)
        for bt, (label, digits, mult, lo, hi) in DEFAULT_BET_TYPES.items()
    }
    return BetTypeRegistry(descriptors, DEFAULT_CONFLICTS)


def _split_conflicts(s: object) -> list[str]:
    if s is None or pd.isna(s):
        return []
    return [x.strip() for x in str(s).split("|") if x.strip()]


def read_registry_csv(path: str | Path) -> BetTypeRegistry:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = sorted(set(REQUIRED_COLS) - set(df.columns))
    if missing:
        raise ValueError(f"bet-type csv missing required columns: {missing}")

    descriptors: dict[BetType, BetTypeDescriptor] = {}
    conflicts: dict[BetType, list[str]] = {}
    for _, r in df.iterrows():
        bt = BetType.from_wire(r["id"])
        if bt in descriptors:
            raise ValueError(f"Duplicate bet type in csv: {bt}")
        try:
            digits = int(str(r["digit_count"]).strip())
        except ValueError as e:
            raise ValueError(f"{bt}: digit_count is not an integer: {r['digit_count']!r}") from e
        descriptors[bt] = BetTypeDescriptor(
            bt,
            str(r["label"]).strip(),
            digits,
            r["multiplier"],
            r["min_stake"],
            r["max_stake"],
        )
        if "conflicts" in df.columns:
            conflicts[bt] = _split_conflicts(r["conflicts"])

    reg = BetTypeRegistry(descriptors, conflicts)
    log.info("Loaded bet types <- %s (types=%s)", path, len(reg))
    return reg


def load_registry(path: str | Path | None = None) -> BetTypeRegistry:
    path = path if path is not None else CFG.bet_types_csv
    if path is None:
        return default_registry()
    return read_registry_csv(path)
