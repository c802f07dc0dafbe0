# agents/conflict_detector_agent.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Sequence, Union

from agents.match_scorer_agent import check_criteria
from models.aggregate import AggregatedPreferences
from models.conflict import ConflictRecord, Criterion, GroupConflict, Severity
from models.preferences import Candidate, Pacing, PreferenceRecord, WakeUpTime

logger = logging.getLogger(__name__)

Target = Union[Candidate, AggregatedPreferences]

# Daily budget spread thresholds, RM
BUDGET_SPREAD_MEDIUM = 100
BUDGET_SPREAD_HIGH = 200
LOW_DAILY_BUDGET = 150
HIGH_DAILY_BUDGET = 250

SUGGESTIONS = {
    "budget": (
        "Split costs based on individual budgets",
        "Choose mid-range options that work for everyone",
        "Plan some activities separately based on budget",
    ),
    "pacing": (
        "Alternate between active and relaxed days",
        "Allow optional activities for energetic members",
        "Schedule free time for everyone to do their own thing",
    ),
    "timing": (
        "Plan morning activities as optional",
        "Start group activities around 10-11 AM",
        "Evening dinners together, mornings flexible",
    ),
    "dietary": (
        "Research restaurants with diverse options",
        "Book accommodations with kitchen access",
        "Create a shared dietary requirements list",
    ),
}


class ConflictDetectorAgent:
    """
    Agent #3:
    Compares every member with a target (the group aggregate or one candidate)
    and reports one record per failed criterion. It never compares members
    with each other and never raises. A member who hasn't picked activities
    yet is still checked and reports an interest conflict.
    """

    def run(self, members: Sequence[PreferenceRecord], target: Target) -> List[ConflictRecord]:
        candidate = target.as_target() if isinstance(target, AggregatedPreferences) else target
        conflicts: List[ConflictRecord] = []

        for m in members:
            check = check_criteria(m, candidate)
            if not check.budget:
                conflicts.append(self._record(m, Criterion.BUDGET, self._budget_text(m, candidate)))
            if not check.interests:
                conflicts.append(
                    self._record(m, Criterion.INTEREST, f"{m.display_name} may not enjoy {candidate.label}")
                )
            if not check.season:
                conflicts.append(
                    self._record(m, Criterion.SEASON, f"{m.display_name} prefers different seasons for travel")
                )

        logger.debug("Detected %d conflicts against %s", len(conflicts), candidate.id)
        return conflicts

    def resolution_score(
        self,
        members: Sequence[PreferenceRecord],
        current: Iterable[ConflictRecord],
        candidate: Candidate,
    ) -> int:
        """
        How much severity weight switching to `candidate` removes
        (high=3, medium=2, low=1). Negative means it adds conflicts.
        """
        current_total = sum(c.severity.weight for c in current)
        new_total = sum(c.severity.weight for c in self.run(members, candidate))
        return current_total - new_total

    # ----------------------
    # group friction
    # ----------------------

    def analyze_group(self, members: Sequence[PreferenceRecord]) -> List[GroupConflict]:
        ready = [m for m in members if m.is_set]
        if len(ready) < 2:
            return []

        conflicts: List[GroupConflict] = []

        budgets = [(m, m.daily_budget) for m in ready if m.daily_budget is not None]
        if budgets:
            amounts = [b for _, b in budgets]
            spread = max(amounts) - min(amounts)
            if spread > BUDGET_SPREAD_MEDIUM:
                low = [m.display_name for m, b in budgets if b < LOW_DAILY_BUDGET]
                high = [m.display_name for m, b in budgets if b > HIGH_DAILY_BUDGET]
                conflicts.append(
                    GroupConflict(
                        kind="budget",
                        severity=Severity.HIGH if spread > BUDGET_SPREAD_HIGH else Severity.MEDIUM,
                        description=f"Daily budget varies from RM{min(amounts):.0f} to RM{max(amounts):.0f}",
                        affected_members=tuple(low + high),
                        suggestions=SUGGESTIONS["budget"],
                    )
                )

        relaxed = [m.display_name for m in ready if m.pacing == Pacing.RELAXED]
        packed = [m.display_name for m in ready if m.pacing == Pacing.PACKED]
        if relaxed and packed:
            conflicts.append(
                GroupConflict(
                    kind="pacing",
                    severity=Severity.MEDIUM,
                    description="Members have different pacing preferences",
                    affected_members=tuple(relaxed + packed),
                    suggestions=SUGGESTIONS["pacing"],
                )
            )

        early = [m.display_name for m in ready if m.wake_up_time == WakeUpTime.EARLY]
        late = [m.display_name for m in ready if m.wake_up_time == WakeUpTime.LATE]
        if early and late:
            conflicts.append(
                GroupConflict(
                    kind="timing",
                    severity=Severity.LOW,
                    description="Mix of early birds and night owls in the group",
                    affected_members=tuple(early + late),
                    suggestions=SUGGESTIONS["timing"],
                )
            )

        needs: List[str] = []
        for m in ready:
            for d in sorted(m.dietary_restrictions):
                if d and d not in needs:
                    needs.append(d)
        if needs:
            conflicts.append(
                GroupConflict(
                    kind="dietary",
                    severity=Severity.MEDIUM,
                    description=f"Dietary needs: {', '.join(needs)}",
                    affected_members=tuple(m.display_name for m in ready if m.dietary_restrictions),
                    suggestions=SUGGESTIONS["dietary"],
                )
            )

        return conflicts

    def resolve(self, conflict: GroupConflict, resolution: str) -> GroupConflict:
        return replace(conflict, resolved=True, resolution=resolution)

    # ----------------------
    # helpers
    # ----------------------

    def _record(self, member: PreferenceRecord, criterion: Criterion, description: str) -> ConflictRecord:
        return ConflictRecord(
            member_id=member.member_id,
            description=description,
            severity=criterion.severity,
            criterion=criterion,
        )

    def _budget_text(self, member: PreferenceRecord, candidate: Candidate) -> str:
        ceiling = member.budget_range.max if member.budget_range else 0.0
        return (
            f"{member.display_name}'s budget tops out at RM{ceiling:.0f}, "
            f"below the RM{candidate.cost:.0f} {candidate.label} needs"
        )
