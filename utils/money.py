# utils/money.py
from __future__ import annotations
import math


def clamp_non_negative(x: float) -> float:
    return max(0.0, float(x))

def safe_div(a: float, b: float) -> float:
    if b == 0:
        return 0.0
    return a / b

def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def percent(part: float, whole: float) -> int:
    return round_half_up(safe_div(part, whole) * 100)
