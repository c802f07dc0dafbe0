# utils/config.py
from __future__ import annotations
import os
import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    open_budget_min: float = 0.0
    open_budget_max: float = 5000.0
    itinerary_seed: Optional[int] = None
    log_level: str = "INFO"

    def make_rng(self) -> random.Random:
        # Unseeded unless ITINERARY_SEED is set, so plans vary run-to-run.
        return random.Random(self.itinerary_seed)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@lru_cache
def get_settings() -> Settings:
    return Settings(
        open_budget_min=_env_float("GROUP_OPEN_BUDGET_MIN", 0.0),
        open_budget_max=_env_float("GROUP_OPEN_BUDGET_MAX", 5000.0),
        itinerary_seed=_env_int("ITINERARY_SEED"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
