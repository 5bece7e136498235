from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from huaybet.utils.strings import as_amount

SUPPORTED_DIGIT_COUNTS = (1, 2, 3, 4)


class UnknownBetType(KeyError):
    pass


class BetType(str, Enum):
    """Bet-type identifiers. The value is the string the backend uses on the wire."""

    TENG_BON_4 = "teng_bon_4"
    TODE_4 = "tode_4"
    TENG_BON_3 = "teng_bon_3"
    TODE_3 = "tode_3"
    TENG_LANG_3 = "teng_lang_3"
    TENG_BON_2 = "teng_bon_2"
    TENG_LANG_2 = "teng_lang_2"
    TENG_BON_1 = "teng_bon_1"
    TENG_LANG_1 = "teng_lang_1"

    @classmethod
    def from_wire(cls, s: str | BetType) -> BetType:
        if isinstance(s, cls):
            return s
        try:
            return cls(str(s).strip())
        except ValueError:
            raise UnknownBetType(s) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BetTypeDescriptor:
    bet_type: BetType
    label: str
    digit_count: int
    multiplier: Decimal
    min_stake: Decimal
    max_stake: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "bet_type", BetType.from_wire(self.bet_type))
        for name in ("multiplier", "min_stake", "max_stake"):
            object.__setattr__(self, name, as_amount(getattr(self, name)))
        if type(self.digit_count) is not int or self.digit_count not in SUPPORTED_DIGIT_COUNTS:
            raise ValueError(f"{self.bet_type}: digit_count must be 1-4, got {self.digit_count}")
        if self.multiplier <= 0:
            raise ValueError(f"{self.bet_type}: multiplier must be positive, got {self.multiplier}")
        if self.min_stake < 0 or self.max_stake < self.min_stake:
            raise ValueError(
                f"{self.bet_type}: bad stake range {self.min_stake}..{self.max_stake}"
            )

    def accepts_stake(self, stake: Decimal | int | float | str) -> bool:
        return self.min_stake <= as_amount(stake) <= self.max_stake


@dataclass(frozen=True)
class BetLine:
    number: str
    bet_type: BetType
    stake: Decimal
    # payout multiplier at the time the line was added
    multiplier: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "bet_type", BetType.from_wire(self.bet_type))
        object.__setattr__(self, "stake", as_amount(self.stake))
        object.__setattr__(self, "multiplier", as_amount(self.multiplier))
        if self.stake < 0:
            raise ValueError(f"Stake must be >= 0, got {self.stake}")
        if self.multiplier < 0:
            raise ValueError(f"Multiplier must be >= 0, got {self.multiplier}")

    @property
    def key(self) -> tuple[str, BetType]:
        return (self.number, self.bet_type)

    @property
    def potential_win(self) -> Decimal:
        return self.stake * self.multiplier
