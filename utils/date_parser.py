# utils/date_parser.py
from __future__ import annotations
from datetime import date, datetime
from typing import Any, Optional

import dateparser

# Trip windows arrive from English and Malay onboarding forms.
PREFERRED_LANGS = ["en", "ms"]


def parse_date(value: Any) -> Optional[date]:
    """
    Parses common date inputs. Supports:
    - date / datetime objects
    - YYYY-MM-DD
    - YYYY/MM/DD
    - DD.MM.YYYY
    - DD/MM/YYYY
    - Natural language dates (e.g., "15 Feb 2026", "15 Februari 2026") via dateparser
    If parsing fails, returns None.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None

    v = str(value).strip()

    fmts = ["%Y-%m-%d", "%Y/%m/%d", "%d.%m.%Y", "%d/%m/%Y"]
    for fmt in fmts:
        try:
            return datetime.strptime(v, fmt).date()
        except ValueError:
            pass

    # ISO timestamps as sent by browsers, e.g. 2026-02-15T00:00:00.000Z
    try:
        return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    parsed = dateparser.parse(
        v,
        languages=PREFERRED_LANGS,
        settings={"PREFER_DATES_FROM": "future"},
    )
    if parsed:
        return parsed.date()
    return None
