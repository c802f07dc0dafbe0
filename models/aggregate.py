# models/aggregate.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from models.budget import GroupBudget
from models.preferences import Accommodation, ActivityType, Candidate, Pacing

GROUP_TARGET_ID = "group"


@dataclass(frozen=True)
class AggregatedPreferences:
    budget_range: GroupBudget
    top_activities: Tuple[ActivityType, ...] = ()
    preferred_pacing: Pacing = Pacing.MODERATE
    preferred_seasons: Tuple[str, ...] = ()
    accommodation_votes: Dict[Accommodation, int] = field(default_factory=dict)
    dietary_needs: Tuple[str, ...] = ()
    average_daily_budget: Optional[float] = None
    member_count: int = 0
    # activity -> number of members voting for it, same order as top_activities
    activity_votes: Tuple[Tuple[ActivityType, int], ...] = ()

    @property
    def itinerary_budget(self) -> float:
        if self.average_daily_budget is not None:
            return self.average_daily_budget
        return self.budget_range.average

    def consensus_activities(self) -> Tuple[ActivityType, ...]:
        """
        Activities picked by a strict majority of members. Falls back to the
        single leading activity so a group target always has an interest.
        """
        majority = [a for a, votes in self.activity_votes if votes * 2 > self.member_count]
        if majority:
            return tuple(majority)
        return self.top_activities[:1]

    def as_target(self) -> Candidate:
        return Candidate(
            id=GROUP_TARGET_ID,
            name="the group plan",
            cost=self.budget_range.min,
            season=self.preferred_seasons[0] if self.preferred_seasons else None,
            interests=frozenset(self.consensus_activities()),
        )
