# models/itinerary.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Sequence, Tuple

from models.preferences import ActivityType


@dataclass(frozen=True)
class ScheduledActivity:
    time: str
    title: str
    activity_type: ActivityType
    cost: int
    duration: str
    suitable_for: Tuple[str, ...] = ()

    @property
    def is_general(self) -> bool:
        return not self.suitable_for


@dataclass(frozen=True)
class ItineraryDay:
    day: int
    date: date
    activities: Tuple[ScheduledActivity, ...] = ()

    @property
    def total_cost(self) -> int:
        return sum(a.cost for a in self.activities)


def render_days(days: Sequence[ItineraryDay], names: Dict[str, str]) -> str:
    lines: List[str] = []
    for d in days:
        total = f" | RM{d.total_cost}" if d.total_cost else ""
        lines.append(f"Day {d.day} ({d.date.isoformat()}){total}")
        if not d.activities:
            lines.append("  • Free time / explore locally")
        for a in d.activities:
            cost = f" (RM{a.cost})" if a.cost else ""
            lines.append(f"  • {a.time}: {a.title}{cost}, {a.duration}")
            if a.is_general:
                lines.append("    General activity")
            else:
                who = ", ".join(names.get(m, m) for m in a.suitable_for)
                lines.append(f"    Great for: {who}")
        lines.append("")
    return "\n".join(lines).rstrip()
