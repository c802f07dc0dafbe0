# agents/itinerary_synthesizer_agent.py
from __future__ import annotations

import logging
import math
import random
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from models.itinerary import ItineraryDay, ScheduledActivity
from models.preferences import ActivityType, Pacing, PreferenceRecord
from utils.config import Settings, get_settings
from utils.money import clamp_non_negative, safe_div

logger = logging.getLogger(__name__)

ACTIVITIES_PER_DAY = {
    Pacing.RELAXED: 2,
    Pacing.MODERATE: 3,
    Pacing.PACKED: 5,
}

SLOT_LABELS = ["Morning", "Midday", "Afternoon", "Evening", "Night"]

DEFAULT_DURATION = "1-2 hours"

ACTIVITY_TEMPLATES: Dict[ActivityType, List[str]] = {
    ActivityType.ADVENTURE: ["Hiking trail", "Kayaking", "Zipline adventure", "ATV tour", "Snorkeling"],
    ActivityType.CULTURE: ["Museum visit", "Heritage walk", "Traditional crafts workshop", "Temple tour", "Local market"],
    ActivityType.NATURE: ["Nature reserve", "Waterfall hike", "Bird watching", "Botanical garden", "Beach walk"],
    ActivityType.FOOD: ["Street food tour", "Cooking class", "Local restaurant", "Night market", "Food festival"],
    ActivityType.RELAXATION: ["Spa treatment", "Beach day", "Pool time", "Sunset viewing", "Meditation session"],
    ActivityType.NIGHTLIFE: ["Night market", "Live music venue", "Rooftop bar", "Night cruise", "Beach party"],
    ActivityType.SHOPPING: ["Local market", "Souvenir shops", "Shopping mall", "Handicraft village", "Outlet stores"],
}


def slots_for(pacing: Pacing) -> int:
    return ACTIVITIES_PER_DAY.get(pacing, ACTIVITIES_PER_DAY[Pacing.MODERATE])


def slot_label(index: int) -> str:
    return SLOT_LABELS[min(index, len(SLOT_LABELS) - 1)]


class ItinerarySynthesizerAgent:
    """
    Agent #5:
    Lays out a day-by-day schedule from the group's ranked activity types.
    Each day gets its own shuffle, titles are drawn from a phrase bank and
    slot costs vary between 50% and 100% of an even share of the daily budget.

    Output is random unless a seeded `rng` is passed in; it is a presentation
    aid, not a reproducible plan.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def run(
        self,
        start_date: date,
        end_date: date,
        pacing: Pacing,
        top_activities: Sequence[ActivityType],
        average_budget: float,
        members: Sequence[PreferenceRecord],
        rng: Optional[random.Random] = None,
    ) -> List[ItineraryDay]:
        if not top_activities:
            raise ValueError("top_activities must not be empty for itinerary synthesis")

        rng = rng or self.settings.make_rng()
        days = (end_date - start_date).days + 1
        if days <= 0:
            logger.warning("Trip window %s..%s has no days", start_date, end_date)
            return []

        per_day = slots_for(pacing)
        share = safe_div(clamp_non_negative(average_budget), per_day)
        suitable = self._suitability(top_activities, members)

        itinerary: List[ItineraryDay] = []
        for d in range(days):
            shuffled = rng.sample(list(top_activities), len(top_activities))
            activities: List[ScheduledActivity] = []

            for a in range(per_day):
                activity_type = shuffled[a % len(shuffled)]
                templates = ACTIVITY_TEMPLATES.get(activity_type) or ["Free time"]
                activities.append(
                    ScheduledActivity(
                        time=slot_label(a),
                        title=rng.choice(templates),
                        activity_type=activity_type,
                        cost=self._slot_cost(share, rng),
                        duration=DEFAULT_DURATION,
                        suitable_for=suitable[activity_type],
                    )
                )

            itinerary.append(
                ItineraryDay(
                    day=d + 1,
                    date=start_date + timedelta(days=d),
                    activities=tuple(activities),
                )
            )

        logger.debug("Synthesized %d days at %d slots/day", days, per_day)
        return itinerary

    # ----------------------
    # helpers
    # ----------------------

    def _slot_cost(self, share: float, rng: random.Random) -> int:
        cost = round(share * (0.5 + rng.random() * 0.5))
        # rounding up must not push a slot past its even share
        return int(min(cost, math.floor(share)))

    def _suitability(self, activity_types: Sequence[ActivityType], members: Sequence[PreferenceRecord]):
        return {
            t: tuple(m.member_id for m in members if m.likes(t))
            for t in activity_types
        }
