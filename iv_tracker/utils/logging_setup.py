"""Logging configuration for the IV tracker.

Usage:
    from iv_tracker.utils.logging_setup import setup_logging
    setup_logging()                      # level from IV_TRACKER_LOG_LEVEL, INFO by default
    setup_logging("DEBUG", log_to_file=True)

Parse failures in the route text end up here through the default error
callbacks of `iv_tracker.parsing`.
"""
from __future__ import annotations
import logging
import logging.handlers
import os
from pathlib import Path
import sys

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
LOG_LEVEL_ENV = 'IV_TRACKER_LOG_LEVEL'
LOG_FILE_NAME = 'iv_tracker.log'

def resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, 'INFO')
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    # nombre desconocido -> getLevelName devuelve 'Level X'
    return value if isinstance(value, int) else logging.INFO

def setup_logging(level: int | str | None = None, log_to_file: bool = False, log_dir: str | None = None) -> logging.Logger:
    root = logging.getLogger()
    if root.handlers:
        # ya configurado (p.ej. por pytest o por la app que nos embebe)
        return root
    root.setLevel(resolve_level(level))

    fmt = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(stream=sys.stdout)
    console.setFormatter(fmt)
    root.addHandler(console)

    if log_to_file:
        path = Path(log_dir or (Path.cwd() / 'logs'))
        path.mkdir(parents=True, exist_ok=True)
        rotating = logging.handlers.RotatingFileHandler(path / LOG_FILE_NAME, maxBytes=2_000_000, backupCount=3, encoding='utf-8')
        rotating.setFormatter(fmt)
        root.addHandler(rotating)
    return root
