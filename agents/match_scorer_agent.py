# agents/match_scorer_agent.py
from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from models.preferences import Candidate, PreferenceRecord
from models.trip import CriteriaCheck, MatchScore
from utils.money import percent

logger = logging.getLogger(__name__)

CRITERIA_COUNT = 3


def check_criteria(member: PreferenceRecord, candidate: Candidate) -> CriteriaCheck:
    """
    Evaluates the three equally weighted criteria for one member.
    Missing budget or season data counts as a pass; an empty interest set
    never overlaps, so a member who hasn't picked activities fails that axis.
    """
    budget_ok = member.budget_range is None or candidate.cost <= member.budget_range.max
    season_ok = (
        candidate.season is None
        or not member.preferred_seasons
        or member.prefers_season(candidate.season)
    )
    interests_ok = bool(candidate.interests & member.activities)
    return CriteriaCheck(budget=budget_ok, season=season_ok, interests=interests_ok)


class MatchScorerAgent:
    """
    Scores a candidate 0-100 for each member and for the group as a whole.
    Both numbers are returned together with the per-member criteria so
    callers can show which axis failed.
    """

    def member_score(self, member: PreferenceRecord, candidate: Candidate) -> int:
        return percent(check_criteria(member, candidate).points, CRITERIA_COUNT)

    def run(self, candidate: Candidate, members: Sequence[PreferenceRecord]) -> MatchScore:
        checks: Dict[str, CriteriaCheck] = {}
        per_member: Dict[str, int] = {}
        total_points = 0

        for m in members:
            check = check_criteria(m, candidate)
            checks[m.member_id] = check
            per_member[m.member_id] = percent(check.points, CRITERIA_COUNT)
            total_points += check.points

        group = percent(total_points, CRITERIA_COUNT * len(members))
        logger.debug("Candidate %s scored %d%% across %d members", candidate.id, group, len(members))
        return MatchScore(candidate_id=candidate.id, group=group, per_member=per_member, checks=checks)

    def rank(self, candidates: Sequence[Candidate], members: Sequence[PreferenceRecord]) -> List[MatchScore]:
        scores = [self.run(c, members) for c in candidates]
        # sorted() is stable, so equal scores keep catalog order
        return sorted(scores, key=lambda s: -s.group)
