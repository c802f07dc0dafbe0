# models/trip.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple

from models.aggregate import AggregatedPreferences
from models.conflict import ConflictRecord, GroupConflict, Severity
from models.itinerary import ItineraryDay


@dataclass(frozen=True)
class TripWindow:
    start_date: date
    end_date: date
    destination: str = ""

    @property
    def num_days(self) -> int:
        # Both boundary dates are trip days.
        return max(0, (self.end_date - self.start_date).days + 1)


@dataclass(frozen=True)
class CriteriaCheck:
    budget: bool
    season: bool
    interests: bool

    @property
    def points(self) -> int:
        return int(self.budget) + int(self.season) + int(self.interests)


@dataclass(frozen=True)
class MatchScore:
    candidate_id: str
    group: int
    per_member: Dict[str, int] = field(default_factory=dict)
    checks: Dict[str, CriteriaCheck] = field(default_factory=dict)


@dataclass(frozen=True)
class GroupPlan:
    trip: TripWindow
    aggregate: AggregatedPreferences
    conflicts: Tuple[ConflictRecord, ...]
    group_conflicts: Tuple[GroupConflict, ...]
    scores: Tuple[MatchScore, ...]
    itinerary: Tuple[ItineraryDay, ...]
    unset_members: Tuple[str, ...] = ()
    names: Optional[Dict[str, str]] = None

    def member_names(self) -> Dict[str, str]:
        return dict(self.names or {})

    def high_severity(self) -> List[ConflictRecord]:
        return [c for c in self.conflicts if c.severity == Severity.HIGH]
