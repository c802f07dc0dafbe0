import itertools
import random
from datetime import date

from agents.group_trip_agent import GroupTripAgent
from models.conflict import Criterion
from models.preferences import Accommodation, ActivityType, Candidate, Pacing
from models.trip import TripWindow
from utils.config import Settings

TRIP = TripWindow(start_date=date(2026, 2, 15), end_date=date(2026, 2, 18), destination="Melaka")


def agent():
    return GroupTripAgent(Settings())


def test_aggregate_example(member_a, member_b):
    aggregate = agent().aggregate([member_a, member_b])
    assert aggregate.budget_range.min == 1500
    assert aggregate.budget_range.max == 1000
    assert aggregate.budget_range.average == 1375
    assert aggregate.top_activities == (ActivityType.CULTURE, ActivityType.FOOD, ActivityType.SHOPPING)
    assert aggregate.preferred_seasons == ("Raya", "CNY")


def test_top_activities_by_votes(make_member):
    members = [
        make_member("a", activities={ActivityType.CULTURE}),
        make_member("b", activities={ActivityType.FOOD, ActivityType.NATURE}),
        make_member("c", activities={ActivityType.NATURE, ActivityType.FOOD}),
        make_member("d", activities={ActivityType.NATURE}),
    ]
    aggregate = agent().aggregate(members)
    assert aggregate.top_activities == (ActivityType.NATURE, ActivityType.FOOD, ActivityType.CULTURE)
    assert aggregate.consensus_activities() == (ActivityType.NATURE,)


def test_pacing_majority_and_ties(make_member):
    packed = [make_member(str(i), pacing=Pacing.PACKED) for i in range(2)]
    relaxed = [make_member("r", pacing=Pacing.RELAXED)]
    assert agent().aggregate(packed + relaxed).preferred_pacing == Pacing.PACKED
    assert agent().aggregate(packed[:1] + relaxed).preferred_pacing == Pacing.MODERATE
    assert agent().aggregate([make_member("u")]).preferred_pacing == Pacing.MODERATE


def test_empty_group():
    aggregate = agent().aggregate([])
    assert aggregate.budget_range.min == 0
    assert aggregate.budget_range.max == 5000
    assert aggregate.top_activities == ()
    assert aggregate.preferred_pacing == Pacing.MODERATE


def test_extra_aggregates(make_member):
    members = [
        make_member("a", accommodation=Accommodation.HOTEL, daily_budget=100, dietary_restrictions=frozenset({"halal"})),
        make_member("b", accommodation=Accommodation.HOTEL, daily_budget=300),
        make_member("c", accommodation=Accommodation.RESORT),
    ]
    aggregate = agent().aggregate(members)
    assert aggregate.accommodation_votes == {Accommodation.HOTEL: 2, Accommodation.RESORT: 1}
    assert aggregate.dietary_needs == ("halal",)
    assert aggregate.average_daily_budget == 200
    assert aggregate.itinerary_budget == 200


def test_average_daily_budget_ignores_member_order(make_member):
    members = [
        make_member("a", daily_budget=120.1),
        make_member("b", daily_budget=333.33),
        make_member("c", daily_budget=87.07),
        make_member("d", daily_budget=1e16),
        make_member("e", daily_budget=0.01),
    ]
    averages = {agent().aggregate(list(p)).average_daily_budget for p in itertools.permutations(members)}
    assert len(averages) == 1


def test_itinerary_budget_falls_back_to_range(member_a, make_member):
    m = make_member("z", 100, 300, activities={ActivityType.FOOD})
    aggregate = agent().aggregate([m])
    assert aggregate.average_daily_budget is None
    assert aggregate.itinerary_budget == 200


def test_score_candidate(member_a, member_b, melaka):
    score = agent().score_candidate(melaka, [member_a, member_b])
    assert score.group == 83
    assert score.per_member == {"a": 100, "b": 67}


def test_synthesize_uses_aggregate(member_a, member_b):
    orchestrator = agent()
    aggregate = orchestrator.aggregate([member_a, member_b])
    days = orchestrator.synthesize_itinerary(TRIP, aggregate, [member_a, member_b], rng=random.Random(1))
    assert len(days) == 4
    # one relaxed and one packed member tie, so the plan runs at moderate pace
    assert all(len(d.activities) == 3 for d in days)
    share = aggregate.itinerary_budget / 3
    assert all(a.cost <= share for d in days for a in d.activities)


def test_plan_from_raw_members(melaka):
    raw = [
        {"id": "a", "name": "Aisyah", "budgetRange": {"min": 0, "max": 1000},
         "preferredSeasons": ["Raya"], "activities": ["culture", "food"], "dailyBudget": 150},
        {"id": "b", "name": "Wei Ming", "budgetRange": {"min": 1500, "max": 3000},
         "preferredSeasons": ["CNY"], "activities": ["shopping"], "dailyBudget": 350},
        {"id": "c", "name": "Priya"},
    ]
    plan = agent().plan(TRIP, raw, [melaka], rng=random.Random(3))
    assert plan.unset_members == ("c",)
    assert plan.high_severity()[0].member_id == "a"
    assert len(plan.itinerary) == 4
    assert plan.scores[0].candidate_id == "melaka"
    assert {g.kind for g in plan.group_conflicts} == {"budget"}


def test_plan_without_activities_skips_itinerary():
    plan = agent().plan(TRIP, [{"id": "c", "name": "Priya"}])
    assert plan.itinerary == ()
    assert [(c.member_id, c.criterion) for c in plan.conflicts] == [("c", Criterion.INTEREST)]


def test_calls_do_not_mutate_members(member_a, member_b, melaka):
    members = [member_a, member_b]
    snapshot = list(members)
    orchestrator = agent()
    orchestrator.aggregate(members)
    orchestrator.detect_conflicts(members, melaka)
    orchestrator.score_candidate(melaka, members)
    assert members == snapshot
