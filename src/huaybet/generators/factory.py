from __future__ import annotations
from typing import Callable
from huaybet.generators import patterns, permutations

# name -> (generator, takes_input)
PATTERNS: dict[str, tuple[Callable[..., list[str]], bool]] = {
    "gate_19": (patterns.gate_19, True),
    "doubles": (patterns.doubles, False),
    "rood_nha": (patterns.leading_run, True),
    "rood_lung": (patterns.trailing_run, True),
    "low": (patterns.low_half, False),
    "high": (patterns.high_half, False),
    "even": (patterns.evens, False),
    "odd": (patterns.odds, False),
    "shuffle_2": (permutations.permute_2, True),
    "shuffle_3": (permutations.permute_3, True),
    "shuffle_4": (permutations.permute_4, True),
}


def expand_pattern(name: str, text: str = "") -> list[str]:
    n = name.strip().lower()
    if n not in PATTERNS:
        raise ValueError(f"Unknown pattern: {name}")
    fn, takes_input = PATTERNS[n]
    return fn(text.strip()) if takes_input else fn()
