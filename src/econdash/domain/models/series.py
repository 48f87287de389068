"""Time-series domain models."""

from __future__ import annotations

import datetime as dt
from enum import Enum

import pandas as pd
from pydantic import ConfigDict, Field

from econdash.domain.models.base import ValueObject


class TimeSeriesPoint(ValueObject):
    """Value object representing a single dated observation."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    date: dt.date = Field(..., description="Observation date")
    value: float | None = Field(default=None, description="Observation value, None if missing")


class RawObservation(ValueObject):
    """Unvalidated observation exactly as an upstream provider returned it."""

    date: str | dt.date | None = Field(default=None, description="Date as sent upstream")
    value: str | float | int | None = Field(default=None, description="Value as sent upstream")


class SeriesStatistics(ValueObject):
    """Descriptive statistics over a validated series."""

    mean: float | None = None
    median: float | None = None
    std_dev: float | None = None
    min: float | None = None
    max: float | None = None
    count: int = Field(default=0, ge=0)


class PeriodChange(ValueObject):
    """Move from the first to the last observation of a window."""

    start: TimeSeriesPoint
    end: TimeSeriesPoint
    absolute_change: float
    percent_change: float | None = None


def _shift_years(day: dt.date, years: int) -> dt.date:
    return (pd.Timestamp(day) + pd.DateOffset(years=years)).date()


class DateWindow(ValueObject):
    """Requested date range; either bound may be left open."""

    start: dt.date | None = None
    end: dt.date | None = None

    @classmethod
    def default(cls, today: dt.date | None = None, years: int = 1) -> DateWindow:
        """Window covering the last ``years`` years ending ``today``."""
        end = today or dt.date.today()
        return cls(start=_shift_years(end, -years), end=end)

    def resolve(self, today: dt.date | None = None, years: int = 1) -> DateWindow:
        """Return a closed window, filling open bounds with the default range.

        A start after the end is treated as invalid and replaced by the default.
        """
        default = DateWindow.default(today, years)
        start = self.start if self.start is not None else default.start
        end = self.end if self.end is not None else default.end
        if start is not None and end is not None and start > end:
            return default
        return DateWindow(start=start, end=end)

    def widen_years(self, years: int) -> DateWindow:
        """Move the start back by ``years`` calendar years."""
        if self.start is None:
            return self
        return DateWindow(start=_shift_years(self.start, -years), end=self.end)

    def contains(self, day: dt.date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True


class SeriesSource(str, Enum):
    """Where the points of a returned series came from."""

    FETCHED = "fetched"
    MOCK = "mock"
    EMPTY = "empty"


class IndicatorSeries(ValueObject):
    """Final per-indicator payload handed to the presentation layer."""

    indicator_id: str
    points: list[TimeSeriesPoint] = Field(default_factory=list)
    statistics: SeriesStatistics = Field(default_factory=SeriesStatistics)
    source: SeriesSource = SeriesSource.EMPTY
    requested_window: DateWindow
    fetch_window: DateWindow

    @property
    def is_mock(self) -> bool:
        return self.source is SeriesSource.MOCK

    @property
    def latest(self) -> TimeSeriesPoint | None:
        return self.points[-1] if self.points else None

    @property
    def previous(self) -> TimeSeriesPoint | None:
        return self.points[-2] if len(self.points) >= 2 else None
