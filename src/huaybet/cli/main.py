from __future__ import annotations

from pathlib import Path

import typer
from rich import print

from huaybet.generators.factory import PATTERNS, expand_pattern
from huaybet.grid.builder import filter_by_substring, generate_grid, group_by_leading_hundred
from huaybet.logging import set_level
from huaybet.registry.bet_types import load_registry
from huaybet.slip.totals import potential_win
from huaybet.types import UnknownBetType
from huaybet.validation.validator import Validator

app = typer.Typer(add_completion=False)


@app.callback()
def main_options(
    log_level: str = typer.Option("", help="Override HUAY_LOG_LEVEL (DEBUG, INFO, ...)"),
):
    if log_level:
        set_level(log_level)


@app.command("bet-types")
def cmd_bet_types(
    csv: Path | None = typer.Option(None, help="Bet-type CSV (default: HUAY_BET_TYPES_CSV or built-in table)"),
):
    try:
        registry = load_registry(csv)
    except (ValueError, UnknownBetType) as e:
        raise typer.BadParameter(str(e)) from e
    for d in registry:
        print(
            {
                "id": d.bet_type.value,
                "label": d.label,
                "digits": d.digit_count,
                "multiplier": str(d.multiplier),
                "min": str(d.min_stake),
                "max": str(d.max_stake),
                "conflicts": sorted(c.value for c in registry.conflicts_for(d.bet_type)),
            }
        )


@app.command("expand")
def cmd_expand(
    pattern: str = typer.Argument(..., help=" | ".join(PATTERNS)),
    text: str = typer.Argument("", help="Digit(s) the pattern starts from"),
):
    try:
        nums = expand_pattern(pattern, text)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    print({"pattern": pattern, "input": text, "count": len(nums), "numbers": nums})


@app.command("grid")
def cmd_grid(
    digits: int = typer.Argument(...),
    search: str = typer.Option("", help="Keep numbers containing this substring"),
    group: bool = typer.Option(False, help="Group a 3-digit grid by leading hundred"),
):
    nums = filter_by_substring(generate_grid(digits), search)
    if group:
        try:
            groups = group_by_leading_hundred(nums)
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e
        print({k: len(v) for k, v in groups.items()})
        return
    print({"digits": digits, "count": len(nums), "numbers": nums})


@app.command("check")
def cmd_check(
    number: str = typer.Argument(...),
    bet_type: str = typer.Argument(...),
    stake: str = typer.Option("1"),
    csv: Path | None = typer.Option(None),
):
    try:
        registry = load_registry(csv)
    except (ValueError, UnknownBetType) as e:
        raise typer.BadParameter(str(e)) from e
    reason = Validator(registry).rejection_reason(number, bet_type, stake, [])
    out = {"number": number, "bet_type": bet_type, "ok": reason is None, "reason": reason}
    if reason is None:
        out["potential_win"] = str(potential_win(stake, registry.get(bet_type).multiplier))
    print(out)
    if reason is not None:
        raise typer.Exit(code=1)


def main():
    app()


if __name__ == "__main__":
    main()
