# agents/budget_aggregator_agent.py
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from models.budget import BudgetRange, GroupBudget
from models.preferences import PreferenceRecord
from utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


class BudgetAggregatorAgent:
    """
    Reduces per-member budget ranges to one group range:
    the highest floor, the lowest ceiling, and the mean midpoint.
    A group whose ranges don't overlap comes back with min > max;
    that is reported later as a conflict, never raised here.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def run(self, ranges: Iterable[BudgetRange]) -> GroupBudget:
        ranges = list(ranges)
        if not ranges:
            return self.open_range()

        budget = GroupBudget(
            min=max(r.min for r in ranges),
            max=min(r.max for r in ranges),
            average=math.fsum(r.midpoint for r in ranges) / len(ranges),
        )
        if not budget.is_feasible:
            logger.warning(
                "Group budgets do not overlap: floor RM%.0f above ceiling RM%.0f",
                budget.min,
                budget.max,
            )
        return budget

    def from_members(self, members: Iterable[PreferenceRecord]) -> GroupBudget:
        ranges: List[BudgetRange] = [m.budget_range for m in members if m.budget_range is not None]
        return self.run(ranges)

    def open_range(self) -> GroupBudget:
        low = self.settings.open_budget_min
        high = self.settings.open_budget_max
        return GroupBudget(min=low, max=high, average=(low + high) / 2)
