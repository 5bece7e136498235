from __future__ import annotations
from itertools import permutations
from huaybet.utils.strings import is_digits


def distinct_permutations(num: str, length: int) -> list[str]:
    """All distinct orderings of the digits of num, sorted. [] unless num is exactly `length` digits.

    Repeated digits collapse: "112" -> ["112", "121", "211"].
    """
    if len(num) != length or not is_digits(num):
        return []
    return sorted({"".join(p) for p in permutations(num)})


def permute_2(num: str) -> list[str]:
    return distinct_permutations(num, 2)


def permute_3(num: str) -> list[str]:
    return distinct_permutations(num, 3)


def permute_4(num: str) -> list[str]:
    return distinct_permutations(num, 4)


shuffle_num_2 = permute_2
shuffle_num_3 = permute_3
tode4_permutations = permute_4
