"""Change-series transforms.

Each transform takes a series sorted ascending by date and returns a new
series whose points are dated at the later point of each pair (or the last
point of each window). Insufficient data never raises; it yields an empty
series. Every pairing re-checks that both values are finite numbers, so a
corrupt point produces a gap rather than a NaN.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from datetime import timedelta

import pandas as pd  # type: ignore[import-untyped]
import structlog

from econdash.domain.models.indicator import Frequency
from econdash.domain.models.series import TimeSeriesPoint
from econdash.domain.services.validation import is_number

logger = structlog.get_logger(__name__)

# Periods per year by frequency. Daily series use a calendar lookback instead.
LOOKBACK_PERIODS: dict[Frequency, int] = {
    Frequency.MONTHLY: 12,
    Frequency.QUARTERLY: 4,
    Frequency.WEEKLY: 52,
}

DAYS_PER_YEAR = 365


def lookback_periods_for(frequency: Frequency) -> int | None:
    """Number of periods in one year for ``frequency`` (None for Daily)."""
    return LOOKBACK_PERIODS.get(frequency)


def _percent(current: float, base: float) -> float:
    return round((current - base) / abs(base) * 100, 2)


def _percent_change(series: Sequence[TimeSeriesPoint], lookback: int) -> list[TimeSeriesPoint]:
    if lookback <= 0 or len(series) < lookback + 1:
        return []

    out: list[TimeSeriesPoint] = []
    for i in range(lookback, len(series)):
        current = series[i].value
        base = series[i - lookback].value
        if not is_number(current) or not is_number(base):
            continue
        if base == 0:
            # zero base: no point emitted, the gap is left to consumers
            continue
        out.append(TimeSeriesPoint(date=series[i].date, value=_percent(current, base)))
    return out


def yoy_percent(
    series: Sequence[TimeSeriesPoint], lookback_periods: int = 12
) -> list[TimeSeriesPoint]:
    """Year-over-year percent change using a fixed number of periods.

    Args:
        series: Ascending validated series
        lookback_periods: Periods per year (12 monthly, 4 quarterly, 52 weekly)

    Returns:
        Percent changes, rounded to 2 decimals
    """
    return _percent_change(series, lookback_periods)


def mom_percent(series: Sequence[TimeSeriesPoint]) -> list[TimeSeriesPoint]:
    """Month-over-month percent change."""
    return _percent_change(series, 1)


def qoq_percent(series: Sequence[TimeSeriesPoint]) -> list[TimeSeriesPoint]:
    """Quarter-over-quarter percent change.

    No quarter boundary detection is done; the input must already be quarterly.
    """
    return _percent_change(series, 1)


def mom_change(series: Sequence[TimeSeriesPoint]) -> list[TimeSeriesPoint]:
    """Absolute change from the previous point."""
    if len(series) < 2:
        return []

    out: list[TimeSeriesPoint] = []
    for prev, point in zip(series, series[1:]):
        if not is_number(point.value) or not is_number(prev.value):
            continue
        out.append(TimeSeriesPoint(date=point.date, value=round(point.value - prev.value, 2)))
    return out


def yoy_percent_by_calendar(
    series: Sequence[TimeSeriesPoint], days: int = DAYS_PER_YEAR
) -> list[TimeSeriesPoint]:
    """Year-over-year percent change against the latest point at least ``days`` earlier.

    Used for daily and irregular series, where "N periods back" does not mean
    one year back once weekends, holidays or missing observations are skipped.
    """
    if days <= 0 or len(series) < 2:
        return []

    dates = [p.date for p in series]
    out: list[TimeSeriesPoint] = []
    for point in series:
        j = bisect_right(dates, point.date - timedelta(days=days)) - 1
        if j < 0:
            continue
        base = series[j].value
        if not is_number(point.value) or not is_number(base) or base == 0:
            continue
        out.append(TimeSeriesPoint(date=point.date, value=_percent(point.value, base)))
    return out


def moving_average(series: Sequence[TimeSeriesPoint], window_size: int) -> list[TimeSeriesPoint]:
    """Simple moving average over ``window_size`` consecutive points.

    Uses a pandas rolling mean with ``min_periods=window_size``; a window that
    contains a non-numeric value yields NaN and is skipped.

    Args:
        series: Ascending validated series
        window_size: Number of points per window, must be positive

    Returns:
        One point per full window, dated at the window's last date
    """
    if window_size <= 0:
        logger.warning("Non-positive moving average window", window_size=window_size)
        return []
    if len(series) < window_size:
        return []

    values = pd.Series(
        [p.value if is_number(p.value) else float("nan") for p in series], dtype="float64"
    )
    rolling = values.rolling(window=window_size, min_periods=window_size).mean()

    out: list[TimeSeriesPoint] = []
    for point, mean in zip(series, rolling):
        if pd.isna(mean):
            continue
        out.append(TimeSeriesPoint(date=point.date, value=round(float(mean), 2)))
    return out
