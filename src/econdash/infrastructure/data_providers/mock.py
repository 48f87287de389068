"""Deterministic synthetic series used when no upstream data is available."""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import date

import pandas as pd  # type: ignore[import-untyped]
import structlog

from econdash.domain.models.indicator import Frequency, IndicatorDescriptor
from econdash.domain.models.series import DateWindow, RawObservation

logger = structlog.get_logger(__name__)

_MODULUS = 2147483647
_MULTIPLIER = 16807

# Probability that a generated point is left blank.
MISSING_VALUE_RATE = 0.02


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def seeded_random(seed_text: str) -> Callable[[], float]:
    """Lehmer (Park-Miller) generator seeded from a string.

    The same text always yields the same sequence of floats.
    """
    seed = 0
    for char in seed_text:
        seed = _to_int32(seed * 31 + ord(char))

    def next_value() -> float:
        nonlocal seed
        # truncated remainder keeps the sign of a negative seed
        seed = int(math.fmod(seed * _MULTIPLIER, _MODULUS))
        return (seed - 1) / (_MODULUS - 1)

    return next_value


def _dates_for(frequency: Frequency, start: date, end: date) -> list[date]:
    begin = pd.Timestamp(start)
    if frequency is Frequency.QUARTERLY:
        begin = begin.to_period("Q").start_time
        freq = "QS"
    elif frequency is Frequency.MONTHLY:
        begin = begin.to_period("M").start_time
        freq = "MS"
    elif frequency is Frequency.WEEKLY:
        freq = "7D"
    else:
        freq = "D"
    return [ts.date() for ts in pd.date_range(begin, pd.Timestamp(end), freq=freq)]


class MockSeriesGenerator:
    """Generates a plausible random walk for an indicator.

    Level and volatility are picked from the indicator's unit, and a few
    bounded indicators are clamped to realistic ranges. Seeding from the
    indicator id makes every call for the same id produce the same shape.
    """

    def __init__(self, missing_value_rate: float = MISSING_VALUE_RATE) -> None:
        self._missing_value_rate = missing_value_rate

    def generate(
        self, indicator: IndicatorDescriptor, window: DateWindow | None = None
    ) -> list[RawObservation]:
        window = (window or DateWindow()).resolve()
        rand = seeded_random(indicator.id)

        dates = _dates_for(indicator.frequency, window.start, window.end)  # type: ignore[arg-type]
        if not dates:
            logger.warning(
                "No mock dates generated for window",
                indicator_id=indicator.id,
                start=window.start.isoformat(),
                end=window.end.isoformat(),
            )
            return []

        base, volatility = self._level(indicator, rand)
        current = base
        points: list[RawObservation] = []
        for day in dates:
            trend = 0.01 * volatility * (rand() - 0.4)
            noise = (rand() - 0.5) * volatility
            current = self._clamp(indicator, current + trend + noise)
            value = round(current, 2) if rand() > self._missing_value_rate else None
            points.append(RawObservation(date=day, value=value))

        if points[-1].value is None:
            fallback = next((p.value for p in reversed(points[:-1]) if p.value is not None), None)
            if fallback is None:
                fallback = round(base + (rand() - 0.5) * volatility, 2)
            points[-1] = RawObservation(date=points[-1].date, value=fallback)

        logger.debug(
            "Generated mock series",
            indicator_id=indicator.id,
            points=len(points),
            frequency=indicator.frequency.value,
        )
        return points

    @staticmethod
    def _level(indicator: IndicatorDescriptor, rand: Callable[[], float]) -> tuple[float, float]:
        unit = indicator.unit
        if indicator.id == "SP500":
            return 4500 + rand() * 1000, 50.0
        if "FEAR_GREED" in indicator.id:
            return 50.0, 25.0
        if "%" in unit:
            return (rand() - 0.5) * 10, 0.5 + rand()
        if "Index" in unit:
            return 100 + rand() * 20, 1 + rand() * 2
        if "Thousands" in unit:
            return 1000 + rand() * 5000, 50 + rand() * 100
        if "Millions" in unit:
            return (1000 + rand() * 5000) * 1_000, (50 + rand() * 100) * 1_000
        if "Billions" in unit:
            return (1000 + rand() * 5000) * 1_000_000, (50 + rand() * 100) * 1_000_000
        if "Number" in unit:
            return 300_000 + rand() * 100_000, 10_000 + rand() * 5_000
        if "USD per" in unit:
            return 50 + rand() * 50, 2 + rand() * 3
        if "per USD" in unit:
            return 0.8 + rand() * 0.4, 0.02 + rand() * 0.03
        return 100.0, 5.0

    @staticmethod
    def _clamp(indicator: IndicatorDescriptor, value: float) -> float:
        ident = indicator.id
        can_go_negative = (
            "%" in indicator.unit
            or "BALANCE" in ident
            or "SPREAD" in ident
            or "FEAR_GREED" in ident
        )
        if not can_go_negative:
            value = max(value, 0.01)
        if ident in ("PMI", "PMI_SERVICES"):
            value = min(max(value, 30), 70)
        elif ident in ("UNRATE", "U6RATE"):
            value = min(max(value, 1), 15)
        elif ident == "CAPUTIL":
            value = min(max(value, 50), 90)
        elif "FEAR_GREED" in ident:
            value = float(min(max(round(value), 0), 100))
        return value
