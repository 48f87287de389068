"""Series validation.

Upstream feeds routinely carry placeholder "no data yet" markers (FRED sends
``"."``) for the most recent period. Those points are dropped here, silently,
so that nothing downstream has to guard against them.
"""

from __future__ import annotations

import datetime as dt
import math
import numbers
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from econdash.domain.models.series import TimeSeriesPoint


def is_number(value: Any) -> bool:
    """True for finite real numbers, including Decimal and numpy scalars (booleans excluded)."""
    return not isinstance(value, str) and parse_value(value) is not None


def parse_value(value: Any) -> float | None:
    """Coerce a raw value to a finite float, or None if it is not one."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, numbers.Real | Decimal):
        try:
            parsed = float(value)
        except (TypeError, ValueError):
            return None
        return parsed if math.isfinite(parsed) else None
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None
    return None


def parse_date(value: Any) -> dt.date | None:
    """Parse an ISO date or datetime string (or date/datetime) to a date.

    The whole string must be ISO formatted; trailing text is rejected.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return dt.date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(text).date()
        except ValueError:
            return None
    return None


def _fields(candidate: Any) -> tuple[Any, Any]:
    if isinstance(candidate, Mapping):
        return candidate.get("date"), candidate.get("value")
    return getattr(candidate, "date", None), getattr(candidate, "value", None)


def validate_series(candidates: Iterable[Any] | None) -> list[TimeSeriesPoint]:
    """Keep the points that have a calendar date and a finite numeric value.

    Input order is preserved and duplicate dates pass through. Never raises.

    Args:
        candidates: Mappings or objects exposing ``date`` and ``value``

    Returns:
        Validated points
    """
    if candidates is None:
        return []

    points: list[TimeSeriesPoint] = []
    for candidate in candidates:
        if candidate is None:
            continue
        raw_date, raw_value = _fields(candidate)
        day = parse_date(raw_date)
        value = parse_value(raw_value)
        if day is None or value is None:
            continue
        points.append(TimeSeriesPoint(date=day, value=value))
    return points


def sort_series(series: Iterable[TimeSeriesPoint]) -> list[TimeSeriesPoint]:
    """Stable ascending sort by date."""
    return sorted(series, key=lambda p: p.date)
