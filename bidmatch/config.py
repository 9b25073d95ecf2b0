# bidmatch/config.py
from __future__ import annotations

import os
from dataclasses import dataclass

# --- Matching (the only runtime knob) ---

# Jobs scoring below this percentage are left out of the ranked list.
DEFAULT_MIN_MATCH_THRESHOLD = 40


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_threshold(name: str, default: int) -> int:
    value = _env_int(name, default)
    if not 0 <= value <= 100:
        return default
    return value


BIDMATCH_MIN_MATCH_THRESHOLD: int = _env_threshold("BIDMATCH_MIN_MATCH_THRESHOLD", DEFAULT_MIN_MATCH_THRESHOLD)


@dataclass(frozen=True)
class MatchConfig:
    threshold: int


def load_match_config() -> MatchConfig:
    """Re-reads the environment (module constants are fixed at import time)."""
    return MatchConfig(
        threshold=_env_threshold("BIDMATCH_MIN_MATCH_THRESHOLD", DEFAULT_MIN_MATCH_THRESHOLD),
    )
