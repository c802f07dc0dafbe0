# main.py
from __future__ import annotations
from datetime import date

from agents.group_trip_agent import GroupTripAgent
from models.preferences import ActivityType, Candidate
from models.trip import TripWindow
from utils.log import setup_logging

if __name__ == "__main__":
    setup_logging()

    trip = TripWindow(
        start_date=date(2026, 2, 15),
        end_date=date(2026, 2, 18),
        destination="Melaka",
    )
    members = [
        {
            "id": "m-aisyah",
            "name": "Nurul Aisyah",
            "preferences": {
                "travelStyle": "comfort",
                "dailyBudget": 200,
                "budgetRange": {"min": 300, "max": 1200},
                "pacing": "moderate",
                "accommodation": "hotel",
                "activities": ["culture", "food"],
                "preferredSeasons": ["Raya"],
                "wakeUpTime": "early",
            },
        },
        {
            "id": "m-wong",
            "name": "Wong Wei Ming",
            "preferences": {
                "travelStyle": "luxury",
                "dailyBudget": 400,
                "budgetRange": {"min": 1500, "max": 3000},
                "pacing": "packed",
                "accommodation": "resort",
                "activities": ["shopping", "food", "nightlife"],
                "preferredSeasons": ["CNY"],
                "wakeUpTime": "late",
                "dietaryRestrictions": ["no pork"],
            },
        },
        {"id": "m-priya", "name": "Priya Devi"},
    ]
    candidates = [
        Candidate(
            id="melaka-historic-city",
            name="Melaka Historic City",
            cost=800,
            season="Raya",
            interests=frozenset({ActivityType.CULTURE, ActivityType.FOOD, ActivityType.SHOPPING}),
        ),
        Candidate(
            id="jonker-street",
            name="Jonker Street & Chinatown",
            cost=450,
            season="CNY",
            interests=frozenset({ActivityType.FOOD, ActivityType.SHOPPING, ActivityType.NIGHTLIFE}),
        ),
    ]

    agent = GroupTripAgent()
    print(agent.run(trip, members, candidates))
