# models/budget.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class BudgetRange:
    min: float
    max: float

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


@dataclass(frozen=True)
class GroupBudget:
    min: float
    max: float
    average: float

    @property
    def is_feasible(self) -> bool:
        # Non-overlapping member ranges leave min above max.
        return self.min <= self.max

    @property
    def shortfall(self) -> float:
        return max(0.0, float(self.min - self.max))
