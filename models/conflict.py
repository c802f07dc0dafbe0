# models/conflict.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        return {"high": 3, "medium": 2, "low": 1}[self.value]


class Criterion(str, Enum):
    BUDGET = "budget"
    INTEREST = "interest"
    SEASON = "season"

    @property
    def severity(self) -> Severity:
        return CRITERION_SEVERITY[self]


# Budget infeasibility blocks a trip; taste mismatches do not.
CRITERION_SEVERITY = {
    Criterion.BUDGET: Severity.HIGH,
    Criterion.INTEREST: Severity.MEDIUM,
    Criterion.SEASON: Severity.LOW,
}


@dataclass(frozen=True)
class ConflictRecord:
    member_id: str
    description: str
    severity: Severity
    criterion: Criterion


@dataclass(frozen=True)
class GroupConflict:
    kind: str  # budget | pacing | timing | dietary
    severity: Severity
    description: str
    affected_members: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()
    resolved: bool = False
    resolution: Optional[str] = None
