# models/preferences.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional

from models.budget import BudgetRange


class TravelStyle(str, Enum):
    UNSET = "unset"
    BUDGET = "budget"
    COMFORT = "comfort"
    LUXURY = "luxury"


class Pacing(str, Enum):
    UNSET = "unset"
    RELAXED = "relaxed"
    MODERATE = "moderate"
    PACKED = "packed"


class Accommodation(str, Enum):
    UNSET = "unset"
    HOSTEL = "hostel"
    HOTEL = "hotel"
    RESORT = "resort"
    AIRBNB = "airbnb"
    ANY = "any"


class WakeUpTime(str, Enum):
    UNSET = "unset"
    EARLY = "early"
    NORMAL = "normal"
    LATE = "late"


class CrowdTolerance(str, Enum):
    UNSET = "unset"
    AVOID = "avoid"
    SOME = "some"
    NO_PREFERENCE = "no-preference"


class ActivityType(str, Enum):
    ADVENTURE = "adventure"
    CULTURE = "culture"
    NATURE = "nature"
    FOOD = "food"
    RELAXATION = "relaxation"
    NIGHTLIFE = "nightlife"
    SHOPPING = "shopping"


@dataclass(frozen=True)
class PreferenceRecord:
    """
    One traveler's constraints. `budget_range` drives destination matching,
    `daily_budget` drives itinerary costing; the two are independent.
    """
    member_id: str
    display_name: str
    travel_style: TravelStyle = TravelStyle.UNSET
    daily_budget: Optional[float] = None
    budget_range: Optional[BudgetRange] = None
    pacing: Pacing = Pacing.UNSET
    accommodation: Accommodation = Accommodation.UNSET
    activities: FrozenSet[ActivityType] = field(default_factory=frozenset)
    preferred_seasons: FrozenSet[str] = field(default_factory=frozenset)
    wake_up_time: WakeUpTime = WakeUpTime.UNSET
    crowd_tolerance: CrowdTolerance = CrowdTolerance.UNSET
    dietary_restrictions: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_set(self) -> bool:
        return len(self.activities) > 0

    def likes(self, activity: ActivityType) -> bool:
        return activity in self.activities

    def prefers_season(self, season: str) -> bool:
        wanted = season.casefold()
        return any(s.casefold() == wanted for s in self.preferred_seasons)


@dataclass(frozen=True)
class Candidate:
    id: str
    cost: float
    season: Optional[str] = None
    interests: FrozenSet[ActivityType] = field(default_factory=frozenset)
    name: str = ""

    @property
    def label(self) -> str:
        return self.name or self.id
