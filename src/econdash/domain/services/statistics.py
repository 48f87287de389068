"""Descriptive statistics for indicator series."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd  # type: ignore[import-untyped]

from econdash.domain.models.series import PeriodChange, SeriesStatistics, TimeSeriesPoint
from econdash.domain.services.validation import is_number


def _round(value: float) -> float:
    return round(float(value), 2)


def calculate_statistics(series: Sequence[TimeSeriesPoint]) -> SeriesStatistics:
    """Compute mean, median, standard deviation, min and max of a series.

    Statistics are computed at full precision with pandas and rounded to two
    decimals afterwards. Standard deviation is the sample standard deviation
    (ddof=1) and needs at least two points.

    Args:
        series: Validated series; points without a numeric value are ignored

    Returns:
        SeriesStatistics with every numeric field None when the series is empty
    """
    values = pd.Series([p.value for p in series if is_number(p.value)], dtype="float64")
    count = int(values.size)
    if count == 0:
        return SeriesStatistics(count=0)

    return SeriesStatistics(
        mean=_round(values.mean()),
        median=_round(values.median()),
        std_dev=_round(values.std(ddof=1)) if count >= 2 else None,
        min=_round(values.min()),
        max=_round(values.max()),
        count=count,
    )


def period_change(series: Sequence[TimeSeriesPoint]) -> PeriodChange | None:
    """Change between the first and last numeric points of a series.

    Returns None with fewer than two numeric points. The percent change is None
    when the first value is zero.
    """
    numeric = [p for p in series if is_number(p.value)]
    if len(numeric) < 2:
        return None

    first, last = numeric[0], numeric[-1]
    absolute = last.value - first.value  # type: ignore[operator]
    percent = _round(absolute / abs(first.value) * 100) if first.value else None
    return PeriodChange(
        start=first,
        end=last,
        absolute_change=_round(absolute),
        percent_change=percent,
    )
