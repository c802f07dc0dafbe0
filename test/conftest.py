import pytest

from models.budget import BudgetRange
from models.preferences import (
    ActivityType,
    Candidate,
    Pacing,
    PreferenceRecord,
    WakeUpTime,
)


def member(member_id, low=None, high=None, seasons=(), activities=(), **kwargs):
    name = kwargs.pop("display_name", member_id.title())
    return PreferenceRecord(
        member_id=member_id,
        display_name=name,
        budget_range=BudgetRange(low, high) if low is not None else None,
        preferred_seasons=frozenset(seasons),
        activities=frozenset(activities),
        **kwargs,
    )


@pytest.fixture
def member_a():
    return member(
        "a", 0, 1000, seasons={"Raya"},
        activities={ActivityType.CULTURE, ActivityType.FOOD},
        display_name="Aisyah",
        pacing=Pacing.RELAXED,
        wake_up_time=WakeUpTime.EARLY,
        daily_budget=120,
    )


@pytest.fixture
def member_b():
    return member(
        "b", 1500, 3000, seasons={"CNY"},
        activities={ActivityType.SHOPPING},
        display_name="Wei Ming",
        pacing=Pacing.PACKED,
        wake_up_time=WakeUpTime.LATE,
        daily_budget=400,
    )


@pytest.fixture
def melaka():
    return Candidate(
        id="melaka",
        name="Melaka Historic City",
        cost=800,
        season="Raya",
        interests=frozenset({ActivityType.CULTURE, ActivityType.FOOD, ActivityType.SHOPPING}),
    )


@pytest.fixture
def make_member():
    return member
