from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

def _env(key: str, default: str) -> str:
    v = os.getenv(key)
    return default if v is None or v == "" else v

def _env_path(key: str) -> Path | None:
    v = _env(key, "")
    return Path(v) if v else None

@dataclass(frozen=True)
class Config:
    # empty -> built-in bet-type table
    bet_types_csv: Path | None = _env_path("HUAY_BET_TYPES_CSV")
    log_level: str = _env("HUAY_LOG_LEVEL", "INFO")

CFG = Config()
