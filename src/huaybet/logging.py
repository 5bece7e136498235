from __future__ import annotations
import logging
import sys
from huaybet.config import CFG

ROOT = "huaybet"
FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _root() -> logging.Logger:
    # one stdout handler on the package logger; module loggers propagate to it
    root = logging.getLogger(ROOT)
    if not root.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(FORMAT))
        root.addHandler(h)
        root.setLevel(_level(CFG.log_level))
        root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    _root()
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)


def set_level(name: str) -> None:
    """Override HUAY_LOG_LEVEL for this process, e.g. DEBUG to see slip rejections."""
    _root().setLevel(_level(name))
