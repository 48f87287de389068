"""Unit tests for change-series transforms."""

from __future__ import annotations

from datetime import date, timedelta

import pandas as pd
import pytest

from econdash.domain.models.indicator import Frequency
from econdash.domain.models.series import TimeSeriesPoint
from econdash.domain.services.transforms import (
    lookback_periods_for,
    mom_change,
    mom_percent,
    moving_average,
    qoq_percent,
    yoy_percent,
    yoy_percent_by_calendar,
)


def _monthly(values: list[float]) -> list[TimeSeriesPoint]:
    dates = pd.date_range("2020-01-01", periods=len(values), freq="MS")
    return [TimeSeriesPoint(date=d.date(), value=v) for d, v in zip(dates, values)]


def _daily(values: list[float], start: date = date(2024, 1, 1)) -> list[TimeSeriesPoint]:
    return [TimeSeriesPoint(date=start + timedelta(days=i), value=v) for i, v in enumerate(values)]


@pytest.mark.unit
class TestYoYPercent:
    def test_linear_series_index_twelve(self) -> None:
        series = _monthly([100 + i for i in range(25)])

        result = yoy_percent(series, lookback_periods=12)

        assert len(result) == 13
        assert result[0].date == series[12].date
        assert result[0].value == 12.0

    def test_zero_base_is_skipped(self) -> None:
        values = [100 + i for i in range(25)]
        values[0] = 0
        values[5] = 0
        series = _monthly(values)

        result = yoy_percent(series, lookback_periods=12)

        assert len(result) == (25 - 12) - 2
        assert series[12].date not in [p.date for p in result]
        assert series[17].date not in [p.date for p in result]

    def test_negative_base_uses_absolute_value(self) -> None:
        series = _monthly([-10, -5])

        result = yoy_percent(series, lookback_periods=1)

        assert result[0].value == 50.0

    def test_insufficient_data_returns_empty(self) -> None:
        assert yoy_percent(_monthly([1.0] * 12), lookback_periods=12) == []
        assert yoy_percent([], lookback_periods=12) == []

    def test_rounds_to_two_decimals(self) -> None:
        result = yoy_percent(_monthly([3, 4]), lookback_periods=1)

        assert result[0].value == 33.33

    def test_skips_non_numeric_pairings(self) -> None:
        series = _monthly([1, 2, 3])
        series[1] = TimeSeriesPoint(date=series[1].date, value=None)

        result = mom_percent(series)

        assert result == []


@pytest.mark.unit
class TestPeriodOverPeriod:
    def test_mom_percent(self) -> None:
        result = mom_percent(_monthly([100, 110, 99]))

        assert [p.value for p in result] == [10.0, -10.0]

    def test_qoq_percent_has_no_quarter_detection(self) -> None:
        series = _monthly([200, 210])

        assert [p.value for p in qoq_percent(series)] == [5.0]

    def test_mom_change_has_no_zero_guard(self) -> None:
        result = mom_change(_monthly([0, 150.5, 100]))

        assert [p.value for p in result] == [150.5, -50.5]
        assert result[0].date == date(2020, 2, 1)

    def test_single_point_returns_empty(self) -> None:
        one = _monthly([1])

        assert mom_percent(one) == []
        assert qoq_percent(one) == []
        assert mom_change(one) == []


@pytest.mark.unit
class TestYoYByCalendar:
    def test_uses_latest_point_at_least_a_year_earlier(self) -> None:
        series = [
            TimeSeriesPoint(date=date(2023, 1, 2), value=100),
            TimeSeriesPoint(date=date(2023, 1, 5), value=200),
            TimeSeriesPoint(date=date(2024, 1, 4), value=110),
        ]

        result = yoy_percent_by_calendar(series)

        # 2024-01-04 minus 365 days is 2023-01-04, so the base is 2023-01-02
        assert len(result) == 1
        assert result[0].value == 10.0

    def test_short_series_returns_empty(self) -> None:
        assert yoy_percent_by_calendar(_daily([1.0] * 30)) == []


@pytest.mark.unit
class TestMovingAverage:
    def test_window_of_three(self) -> None:
        series = _daily([1, 2, 3, 4, 5])

        result = moving_average(series, 3)

        assert [p.value for p in result] == [2.0, 3.0, 4.0]
        assert [p.date for p in result] == [series[2].date, series[3].date, series[4].date]

    def test_rounds_means(self) -> None:
        result = moving_average(_daily([1, 1, 2]), 3)

        assert result[0].value == 1.33

    @pytest.mark.parametrize("window", [0, -1])
    def test_non_positive_window_returns_empty(self, window: int) -> None:
        assert moving_average(_daily([1, 2, 3]), window) == []

    def test_window_larger_than_series_returns_empty(self) -> None:
        assert moving_average(_daily([1, 2]), 3) == []


@pytest.mark.unit
class TestLookbackPeriods:
    def test_periods_per_year(self) -> None:
        assert lookback_periods_for(Frequency.MONTHLY) == 12
        assert lookback_periods_for(Frequency.QUARTERLY) == 4
        assert lookback_periods_for(Frequency.WEEKLY) == 52
        assert lookback_periods_for(Frequency.DAILY) is None
