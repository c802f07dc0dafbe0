import random
from datetime import date

from agents.group_trip_agent import GroupTripAgent
from models.trip import TripWindow
from utils.config import Settings

TRIP = TripWindow(start_date=date(2026, 2, 15), end_date=date(2026, 2, 16), destination="Melaka")


def test_render_lists_sections(member_a, member_b, melaka):
    text = GroupTripAgent(Settings()).run(TRIP, [member_a, member_b], [melaka], rng=random.Random(5))
    assert "### Group Preferences" in text
    assert "- **Destination:** Melaka" in text
    assert "(2 days)" in text
    assert "Budgets don't overlap (short by RM500)" in text
    assert "[high] Aisyah's budget tops out at RM1000" in text
    assert "1) **melaka** | 83% match" in text
    assert "Day 1 (2026-02-15)" in text
    assert "Day 2 (2026-02-16)" in text


def test_render_shows_day_totals(member_a, member_b):
    plan = GroupTripAgent(Settings()).plan(TRIP, [member_a, member_b], rng=random.Random(5))
    text = GroupTripAgent(Settings()).output_agent.render(plan)
    for day in plan.itinerary:
        assert day.total_cost == sum(a.cost for a in day.activities)
        if day.total_cost:
            assert f"Day {day.day} ({day.date.isoformat()}) | RM{day.total_cost}" in text


def test_render_without_conflicts(make_member):
    from models.preferences import ActivityType

    solo = make_member("s", 0, 900, activities={ActivityType.NATURE}, display_name="Solo")
    text = GroupTripAgent(Settings()).run(TRIP, [solo], rng=random.Random(5))
    assert "No conflicts to resolve" in text
    assert "Great for: Solo" in text


def test_render_waiting_members():
    text = GroupTripAgent(Settings()).run(TRIP, [{"id": "p", "name": "Priya"}])
    assert "Waiting on preferences:** Priya" in text
    assert "No daily plan available" in text
