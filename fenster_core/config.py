from __future__ import annotations

import math
import os

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return max(0.0, value)


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return max(minimum, int(raw))
    except ValueError:
        return default


# Seconds the board stays locked after a wrong guess before the cluster is redealt.
PENALTY_DELAY = _env_float("FENSTER_PENALTY_DELAY", 2.0)
# When on, select_start_card refuses face-down cells.
STRICT_START = _env_flag("FENSTER_STRICT_START")
LOG_LEVEL = os.getenv("FENSTER_LOG_LEVEL", "INFO").upper()
# Games the HTTP app keeps in memory; the oldest are closed and dropped beyond this.
MAX_GAMES = _env_int("FENSTER_MAX_GAMES", 256)
