# agents/trip_summary_agent.py
from __future__ import annotations
from typing import List

from models.itinerary import render_days
from models.trip import GroupPlan


class TripSummaryAgent:
    def render(self, plan: GroupPlan) -> str:
        lines: List[str] = []
        agg = plan.aggregate
        names = plan.member_names()

        lines.append("✅ Group Trip Plan")
        lines.append("")
        lines.append("### Group Preferences")
        dest = plan.trip.destination or "—"
        lines.append(f"- **Destination:** {dest}")
        lines.append(
            f"- **Dates:** {plan.trip.start_date} → {plan.trip.end_date} ({plan.trip.num_days} days)"
        )
        budget = agg.budget_range
        lines.append(f"- **Budget range:** RM{budget.min:.0f} – RM{budget.max:.0f} (avg RM{budget.average:.0f})")
        if not budget.is_feasible:
            lines.append(f"- ⚠️ Budgets don't overlap (short by RM{budget.shortfall:.0f})")
        lines.append(f"- **Pacing:** {agg.preferred_pacing.value}")
        if agg.top_activities:
            lines.append(f"- **Top activities:** {', '.join(a.value for a in agg.top_activities)}")
        if agg.preferred_seasons:
            lines.append(f"- **Seasons:** {', '.join(agg.preferred_seasons)}")
        if plan.unset_members:
            waiting = ", ".join(names.get(m, m) for m in plan.unset_members)
            lines.append(f"- **Waiting on preferences:** {waiting}")
        lines.append("")

        lines.append("### Conflicts")
        if not plan.conflicts and not plan.group_conflicts:
            lines.append("- _Everyone's preferences align. No conflicts to resolve!_")
        for c in plan.conflicts:
            lines.append(f"- [{c.severity.value}] {c.description}")
        for g in plan.group_conflicts:
            status = " (resolved)" if g.resolved else ""
            lines.append(f"- [{g.severity.value}] {g.description}{status}")
            if g.affected_members:
                lines.append(f"  Affects: {', '.join(g.affected_members)}")
        lines.append("")

        if plan.scores:
            lines.append("### Candidates")
            for idx, s in enumerate(plan.scores, start=1):
                lines.append(f"{idx}) **{s.candidate_id}** | {s.group}% match")
            lines.append("")

        lines.append("### Itinerary")
        itinerary_text = render_days(plan.itinerary, names)
        if itinerary_text:
            lines.append(itinerary_text)
        else:
            lines.append("- _No daily plan available._")

        return "\n".join(lines)
