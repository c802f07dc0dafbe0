# agents/preference_intake_agent.py
from __future__ import annotations

import logging
from datetime import date, timedelta
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Type, TypeVar

from models.budget import BudgetRange
from models.preferences import (
    Accommodation,
    ActivityType,
    CrowdTolerance,
    Pacing,
    PreferenceRecord,
    TravelStyle,
    WakeUpTime,
)
from models.trip import TripWindow
from utils.date_parser import parse_date
from utils.money import clamp_non_negative

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Labels used by the onboarding screens that differ from the enum values.
_ALIASES = {
    "low-budget": "budget",
    "balanced": "comfort",
    "comfortable": "comfort",
    "avoid-crowd": "avoid",
    "okay-crowd": "some",
}


def _pick(d: Dict[str, Any], *keys: str) -> Any:
    for k in keys:
        if k in d and d[k] is not None:
            return d[k]
    return None


def _as_enum(enum_cls: Type[E], raw: Any, default: E) -> E:
    if isinstance(raw, enum_cls):
        return raw
    if raw is None:
        return default
    key = str(raw).strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return enum_cls(key)
    except ValueError:
        logger.warning("Unknown %s value %r, leaving unset", enum_cls.__name__, raw)
        return default


def _as_float(raw: Any) -> Optional[float]:
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


def _as_strings(raw: Any) -> FrozenSet[str]:
    if not raw:
        return frozenset()
    if isinstance(raw, str):
        raw = [raw]
    values = (s.value if isinstance(s, Enum) else str(s) for s in raw)
    return frozenset(v.strip() for v in values if v.strip())


class PreferenceIntakeAgent:
    """
    Validates/normalizes onboarding input into PreferenceRecord values.
    Works with either a raw dict OR an already built PreferenceRecord.
    Anything missing or unrecognised becomes UNSET/None instead of an error.
    """

    def normalize(self, raw: Any) -> PreferenceRecord:
        if isinstance(raw, PreferenceRecord):
            return raw
        if isinstance(raw, dict):
            return self._from_dict(raw)
        raise TypeError("PreferenceIntakeAgent.normalize expects PreferenceRecord or dict")

    def normalize_all(self, raws: Iterable[Any]) -> List[PreferenceRecord]:
        return [self.normalize(r) for r in raws]

    def trip_window(self, raw: Dict[str, Any], default_days: int = 3) -> TripWindow:
        start = parse_date(_pick(raw, "start_date", "startDate"))
        end = parse_date(_pick(raw, "end_date", "endDate"))

        if start is None:
            start = date.today() + timedelta(days=10)
        if end is None or end < start:
            end = start + timedelta(days=max(1, default_days) - 1)

        return TripWindow(
            start_date=start,
            end_date=end,
            destination=str(_pick(raw, "destination") or "").strip(),
        )

    def _from_dict(self, d: Dict[str, Any]) -> PreferenceRecord:
        # Onboarding sends either a flat record or {id, name, preferences: {...}}
        prefs = d.get("preferences") if isinstance(d.get("preferences"), dict) else d
        member_id = str(_pick(d, "member_id", "memberId", "id") or "").strip()
        name = str(_pick(d, "display_name", "displayName", "name") or member_id).strip()

        return PreferenceRecord(
            member_id=member_id,
            display_name=name,
            travel_style=_as_enum(TravelStyle, _pick(prefs, "travel_style", "travelStyle"), TravelStyle.UNSET),
            daily_budget=self._daily_budget(prefs),
            budget_range=self._budget_range(prefs),
            pacing=_as_enum(Pacing, _pick(prefs, "pacing"), Pacing.UNSET),
            accommodation=_as_enum(Accommodation, _pick(prefs, "accommodation"), Accommodation.UNSET),
            activities=self._activities(_pick(prefs, "activities", "interests")),
            preferred_seasons=_as_strings(_pick(prefs, "preferred_seasons", "preferredSeasons", "seasons")),
            wake_up_time=_as_enum(WakeUpTime, _pick(prefs, "wake_up_time", "wakeUpTime"), WakeUpTime.UNSET),
            crowd_tolerance=_as_enum(
                CrowdTolerance, _pick(prefs, "crowd_tolerance", "crowdTolerance"), CrowdTolerance.UNSET
            ),
            dietary_restrictions=_as_strings(_pick(prefs, "dietary_restrictions", "dietaryRestrictions")),
        )

    def _daily_budget(self, prefs: Dict[str, Any]) -> Optional[float]:
        amount = _as_float(_pick(prefs, "daily_budget", "dailyBudget"))
        return None if amount is None else clamp_non_negative(amount)

    def _budget_range(self, prefs: Dict[str, Any]) -> Optional[BudgetRange]:
        nested = _pick(prefs, "budget_range", "budgetRange")
        if isinstance(nested, BudgetRange):
            return nested
        if isinstance(nested, dict):
            low, high = _as_float(nested.get("min")), _as_float(nested.get("max"))
        elif isinstance(nested, (list, tuple)) and len(nested) == 2:
            low, high = _as_float(nested[0]), _as_float(nested[1])
        else:
            low = _as_float(_pick(prefs, "budget_min", "budgetMin"))
            high = _as_float(_pick(prefs, "budget_max", "budgetMax"))

        if low is None or high is None:
            return None
        low, high = clamp_non_negative(low), clamp_non_negative(high)
        if low > high:
            low, high = high, low
        return BudgetRange(min=low, max=high)

    def _activities(self, raw: Any) -> FrozenSet[ActivityType]:
        picked = set()
        for value in _as_strings(raw):
            try:
                picked.add(ActivityType(value.lower()))
            except ValueError:
                logger.warning("Ignoring unknown activity type %r", value)
        return frozenset(picked)
