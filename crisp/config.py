from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_LOG_LEVEL = 'WARNING'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_recursion_limit() -> int:
    # Evaluation recurses once per nesting level of the source, so deep
    # programs need more headroom than Python's default of 1000.
    return int_from_env('CRISP_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_log_level() -> str:
    level = os.environ.get('CRISP_LOG_LEVEL', '').strip().upper() or _DEFAULT_LOG_LEVEL
    if level not in LOG_LEVELS:
        raise ValueError(f"CRISP_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('CRISP_PRELUDE')
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())
