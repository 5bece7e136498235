from decimal import Decimal
from pathlib import Path

from huaybet.registry.bet_types import default_registry, read_registry_csv
from huaybet.types import BetLine, BetType
from huaybet.validation.validator import Validator

FIXTURE = Path(__file__).parent / "fixtures" / "bet_types_sample.csv"


def test_validate_length():
    v = Validator(default_registry())
    assert v.validate_length("123", "teng_bon_3")
    assert not v.validate_length("123", "teng_bon_2")
    assert v.validate_length("05", BetType.TENG_LANG_2)
    assert not v.validate_length("5", BetType.TENG_LANG_2)
    assert v.validate_length("1234", "tode_4")
    assert not v.validate_length("123", "not_a_type")


def test_no_conflicts_with_empty_rules():
    reg = default_registry()
    v = Validator(reg)
    types = reg.bet_types()
    for a in types:
        for b in types:
            assert not v.has_conflict(a, [b])
    assert not v.has_conflict("teng_bon_3", types)


def test_declared_conflict():
    v = Validator(read_registry_csv(FIXTURE))
    assert v.has_conflict("teng_bon_3", ["teng_bon_2", "tode_3"])
    assert v.has_conflict(BetType.TENG_BON_3, {BetType.TODE_3})
    # rules are one-directional as declared
    assert not v.has_conflict("tode_3", ["teng_bon_3"])
    assert not v.has_conflict("teng_bon_3", ["teng_bon_2", "garbage"])
    assert not v.has_conflict("teng_bon_3", [])


def test_is_duplicate():
    v = Validator(default_registry())
    slip = [BetLine("05", BetType.TENG_BON_2, 10, 90)]
    assert v.is_duplicate("05", "teng_bon_2", slip)
    assert v.is_duplicate("05", BetType.TENG_BON_2, slip)
    assert not v.is_duplicate("5", "teng_bon_2", slip)
    assert not v.is_duplicate("05", "teng_lang_2", slip)
    assert not v.is_duplicate("05", "teng_bon_2", [])


def test_validate_stake():
    v = Validator(default_registry())
    assert v.validate_stake("teng_bon_2", 1)
    assert v.validate_stake("teng_bon_2", "1000")
    assert not v.validate_stake("teng_bon_2", Decimal("1000.01"))
    assert not v.validate_stake("teng_bon_1", 600)
    assert not v.validate_stake("teng_bon_2", 0)
    assert not v.validate_stake("teng_bon_2", "abc")
    assert not v.validate_stake("nope", 10)


def test_rejection_reason():
    v = Validator(read_registry_csv(FIXTURE))
    slip = [BetLine("123", "tode_3", 10, 100)]
    assert v.rejection_reason("321", "tode_3", 10, slip) is None
    assert v.rejection_reason("123", "tode_3", 10, slip) == "duplicate"
    assert v.rejection_reason("12", "tode_3", 10, slip) == "bad_length"
    assert v.rejection_reason("1x", "teng_bon_2", 10, slip) == "not_digits"
    assert v.rejection_reason("555", "teng_bon_3", 10, slip) == "conflict"
    assert v.rejection_reason("55", "teng_bon_2", 5000, slip) == "stake_out_of_range"
    assert v.rejection_reason("5555", "teng_bon_4", 10, slip) == "unknown_bet_type"


def test_is_duplicate_normalises_wire_string():
    v = Validator(default_registry())
    slip = [BetLine("12", "teng_bon_2", 10, 90)]
    assert v.is_duplicate("12", " teng_bon_2 ", slip)
    assert not v.is_duplicate("12", "teng_bon_22", slip)
