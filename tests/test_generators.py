import pytest

from huaybet.generators.factory import expand_pattern
from huaybet.generators.patterns import (
    doubles,
    evens,
    gate_19,
    high_half,
    low_half,
    odds,
    rood_lung,
    rood_nha,
)
from huaybet.generators.permutations import (
    permute_3,
    permute_4,
    shuffle_num_2,
    shuffle_num_3,
    tode4_permutations,
)


def test_gate_19_every_digit():
    for d in "0123456789":
        nums = gate_19(d)
        assert len(nums) == 19
        assert len(set(nums)) == len(nums)
        assert nums == sorted(nums)
        assert all(d in (n[0], n[1]) for n in nums)
        assert nums.count(d + d) == 1


def test_gate_19_example():
    nums = gate_19("5")
    assert nums[:3] == ["05", "15", "25"]
    assert "55" in nums and "59" in nums and "95" in nums


def test_leading_and_trailing_run():
    assert rood_nha("5") == ["50", "51", "52", "53", "54", "55", "56", "57", "58", "59"]
    assert rood_lung("5") == ["05", "15", "25", "35", "45", "55", "65", "75", "85", "95"]


def test_wrong_length_input_gives_empty():
    # partially typed or over-typed input
    assert gate_19("") == []
    assert gate_19("12") == []
    assert rood_nha("") == []
    assert rood_lung("55") == []
    assert shuffle_num_2("1") == []
    assert permute_3("12") == []
    assert permute_4("12345") == []
    assert permute_3("1a2") == []


def test_fixed_sets():
    assert doubles() == ["00", "11", "22", "33", "44", "55", "66", "77", "88", "99"]
    low, high = low_half(), high_half()
    assert len(low) == 50 and low[0] == "00" and low[-1] == "49"
    assert len(high) == 50 and high[0] == "50" and high[-1] == "99"
    assert sorted(low + high) == low + high
    ev, od = evens(), odds()
    assert len(ev) == 50 and ev[0] == "00" and ev[-1] == "98"
    assert len(od) == 50 and od[0] == "01" and od[-1] == "99"
    assert all(int(x) % 2 == 0 for x in ev)
    assert set(ev).isdisjoint(od)


def test_permute_2():
    assert shuffle_num_2("12") == ["12", "21"]
    assert shuffle_num_2("33") == ["33"]


def test_permute_3_sizes():
    assert permute_3("123") == ["123", "132", "213", "231", "312", "321"]
    assert permute_3("112") == ["112", "121", "211"]
    assert permute_3("777") == ["777"]
    assert permute_3("100") == ["001", "010", "100"]


def test_permute_3_matches_sorted_digits():
    for n in ["000", "019", "505", "987", "440"]:
        out = permute_3(n)
        assert len(out) == len(set(out))
        assert all(sorted(x) == sorted(n) for x in out)
        assert n in out


def test_permute_4():
    out = permute_4("1234")
    assert len(out) == 24
    assert out[0] == "1234" and out[-1] == "4321"
    assert len(permute_4("1122")) == 6
    assert len(permute_4("1112")) == 4
    assert permute_4("0000") == ["0000"]


def test_generators_are_deterministic():
    for name, text in [("gate_19", "3"), ("shuffle_3", "908"), ("shuffle_4", "2024"), ("odd", "")]:
        assert expand_pattern(name, text) == expand_pattern(name, text)


def test_expand_pattern():
    assert expand_pattern("rood_nha", "5") == rood_nha("5")
    assert expand_pattern(" Even ") == evens()
    assert expand_pattern("shuffle_2", "12") == ["12", "21"]
    with pytest.raises(ValueError):
        expand_pattern("nope", "1")


def test_betting_page_names():
    assert shuffle_num_3("123") == permute_3("123")
    assert tode4_permutations("2024") == permute_4("2024")
    assert len(tode4_permutations("2024")) == 12
