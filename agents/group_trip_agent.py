# agents/group_trip_agent.py
from __future__ import annotations

import logging
import math
import random
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from agents.budget_aggregator_agent import BudgetAggregatorAgent
from agents.conflict_detector_agent import ConflictDetectorAgent, Target
from agents.itinerary_synthesizer_agent import ItinerarySynthesizerAgent
from agents.match_scorer_agent import MatchScorerAgent
from agents.preference_intake_agent import PreferenceIntakeAgent
from agents.trip_summary_agent import TripSummaryAgent
from models.aggregate import AggregatedPreferences
from models.conflict import ConflictRecord, GroupConflict
from models.itinerary import ItineraryDay
from models.preferences import Accommodation, ActivityType, Candidate, Pacing, PreferenceRecord
from models.trip import GroupPlan, MatchScore, TripWindow
from utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ACTIVITY_ORDER = {a: i for i, a in enumerate(ActivityType)}


def _rank_by_votes(votes: Iterable[T]) -> List[Tuple[T, int]]:
    counts: Dict[T, int] = {}
    for v in votes:
        counts[v] = counts.get(v, 0) + 1
    # dicts keep first-seen order and sorted() is stable, so ties stay first-seen
    return sorted(counts.items(), key=lambda kv: -kv[1])


class GroupTripAgent:
    """
    Orchestrator for the group-trip engine. Holds no trip state: every call
    works from the member list it is given and returns fresh values.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.intake_agent = PreferenceIntakeAgent()
        self.budget_agent = BudgetAggregatorAgent(self.settings)
        self.scorer_agent = MatchScorerAgent()
        self.conflict_agent = ConflictDetectorAgent()
        self.itinerary_agent = ItinerarySynthesizerAgent(self.settings)
        self.output_agent = TripSummaryAgent()

    # ----------------------
    # engine operations
    # ----------------------

    def aggregate(self, members: Sequence[PreferenceRecord]) -> AggregatedPreferences:
        ready = [m for m in members if m.is_set]

        activity_votes = _rank_by_votes(
            a for m in members for a in sorted(m.activities, key=_ACTIVITY_ORDER.__getitem__)
        )
        season_votes = _rank_by_votes(s for m in members for s in sorted(m.preferred_seasons))

        accommodation_votes = Counter(
            m.accommodation for m in members if m.accommodation != Accommodation.UNSET
        )
        dietary: List[str] = []
        for m in members:
            for d in sorted(m.dietary_restrictions):
                if d not in dietary:
                    dietary.append(d)

        daily = [m.daily_budget for m in members if m.daily_budget is not None]

        aggregated = AggregatedPreferences(
            budget_range=self.budget_agent.from_members(members),
            top_activities=tuple(a for a, _ in activity_votes),
            preferred_pacing=self._majority_pacing(members),
            preferred_seasons=tuple(s for s, _ in season_votes),
            accommodation_votes=dict(accommodation_votes),
            dietary_needs=tuple(dietary),
            average_daily_budget=math.fsum(daily) / len(daily) if daily else None,
            member_count=len(ready),
            activity_votes=tuple(activity_votes),
        )
        logger.debug(
            "Aggregated %d members: budget %s, pacing %s",
            len(members),
            aggregated.budget_range,
            aggregated.preferred_pacing.value,
        )
        return aggregated

    def detect_conflicts(self, members: Sequence[PreferenceRecord], target: Target) -> List[ConflictRecord]:
        return self.conflict_agent.run(members, target)

    def score_candidate(self, candidate: Candidate, members: Sequence[PreferenceRecord]) -> MatchScore:
        return self.scorer_agent.run(candidate, members)

    def synthesize_itinerary(
        self,
        trip: TripWindow,
        aggregate: AggregatedPreferences,
        members: Sequence[PreferenceRecord],
        rng: Optional[random.Random] = None,
    ) -> List[ItineraryDay]:
        return self.itinerary_agent.run(
            start_date=trip.start_date,
            end_date=trip.end_date,
            pacing=aggregate.preferred_pacing,
            top_activities=aggregate.top_activities,
            average_budget=aggregate.itinerary_budget,
            members=members,
            rng=rng,
        )

    # ----------------------
    # extras
    # ----------------------

    def analyze_group(self, members: Sequence[PreferenceRecord]) -> List[GroupConflict]:
        return self.conflict_agent.analyze_group(members)

    def rank_candidates(
        self, candidates: Sequence[Candidate], members: Sequence[PreferenceRecord]
    ) -> List[MatchScore]:
        return self.scorer_agent.rank(candidates, members)

    def unset_members(self, members: Sequence[PreferenceRecord]) -> List[str]:
        return [m.member_id for m in members if not m.is_set]

    def plan(
        self,
        trip: TripWindow,
        members: Sequence[Any],
        candidates: Sequence[Candidate] = (),
        rng: Optional[random.Random] = None,
    ) -> GroupPlan:
        records = self.intake_agent.normalize_all(members)
        aggregate = self.aggregate(records)

        itinerary: List[ItineraryDay] = []
        if aggregate.top_activities:
            itinerary = self.synthesize_itinerary(trip, aggregate, records, rng=rng)
        else:
            logger.info("No member has picked activities yet; skipping itinerary")

        return GroupPlan(
            trip=trip,
            aggregate=aggregate,
            conflicts=tuple(self.detect_conflicts(records, aggregate)),
            group_conflicts=tuple(self.analyze_group(records)),
            scores=tuple(self.rank_candidates(candidates, records)),
            itinerary=tuple(itinerary),
            unset_members=tuple(self.unset_members(records)),
            names={m.member_id: m.display_name for m in records},
        )

    def run(
        self,
        trip: TripWindow,
        members: Sequence[Any],
        candidates: Sequence[Candidate] = (),
        rng: Optional[random.Random] = None,
    ) -> str:
        return self.output_agent.render(self.plan(trip, members, candidates, rng=rng))

    # ----------------------
    # helpers
    # ----------------------

    def _majority_pacing(self, members: Sequence[PreferenceRecord]) -> Pacing:
        votes = Counter(m.pacing for m in members if m.pacing != Pacing.UNSET)
        if not votes:
            return Pacing.MODERATE
        ranked = votes.most_common()
        if len(ranked) > 1 and ranked[0][1] == ranked[1][1]:
            return Pacing.MODERATE
        return ranked[0][0]
