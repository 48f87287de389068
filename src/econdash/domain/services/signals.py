"""Rule-based interpretation of the latest indicator reading."""

from __future__ import annotations

from enum import Enum

from econdash.domain.models.indicator import CalculationType, IndicatorDescriptor
from econdash.domain.models.series import TimeSeriesPoint
from econdash.domain.models.signals import IndicatorSignal, SignalSentiment, SignalStrength


class Direction(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    SAME = "same"
    NO_DATA = "nodata"


def compare_values(current: float | None, previous: float | None) -> Direction:
    """Direction of change with a 0.1% tolerance band around ``previous``."""
    if current is None or previous is None:
        return Direction.NO_DATA
    tolerance = 0.001 * abs(previous or 1)
    if current > previous + tolerance:
        return Direction.INCREASE
    if current < previous - tolerance:
        return Direction.DECREASE
    return Direction.SAME


def _signal(
    sentiment: SignalSentiment, message: str, strength: SignalStrength | None = None
) -> IndicatorSignal:
    return IndicatorSignal(sentiment=sentiment, message=message, strength=strength)


def _unemployment(value: float, direction: Direction) -> IndicatorSignal:
    if value < 4.0 and direction is Direction.DECREASE:
        return _signal(
            SignalSentiment.BULLISH,
            f"Unemployment very low and falling ({value}%). Strong labor market.",
            SignalStrength.STRONG,
        )
    if direction is Direction.DECREASE:
        return _signal(SignalSentiment.BULLISH, f"Unemployment rate decreasing ({value}%).")
    if value > 5.5 and direction is Direction.INCREASE:
        return _signal(
            SignalSentiment.BEARISH,
            f"Unemployment rising to concerning levels ({value}%).",
            SignalStrength.STRONG,
        )
    if direction is Direction.INCREASE:
        return _signal(SignalSentiment.BEARISH, f"Unemployment rate increasing ({value}%).")
    return _signal(SignalSentiment.NEUTRAL, f"Unemployment rate stable ({value}%).")


def _inflation(value: float, direction: Direction) -> IndicatorSignal:
    if value > 4.0:
        return _signal(
            SignalSentiment.BEARISH,
            f"High inflation ({value}%) may prompt aggressive policy response.",
            SignalStrength.STRONG,
        )
    if value > 2.5 and direction is Direction.INCREASE:
        return _signal(SignalSentiment.BEARISH, f"Inflation ({value}%) rising above target.")
    if 1.5 <= value <= 2.5 and direction in (Direction.DECREASE, Direction.SAME):
        return _signal(
            SignalSentiment.BULLISH, f"Inflation ({value}%) near target and stable/falling."
        )
    if value < 1.0:
        return _signal(
            SignalSentiment.MIXED, f"Very low inflation ({value}%) could indicate weak demand."
        )
    return _signal(SignalSentiment.NEUTRAL, f"Inflation at {value}%.")


def _vix(value: float, direction: Direction) -> IndicatorSignal:
    if value > 25:
        return _signal(
            SignalSentiment.BEARISH,
            f"VIX high ({value:.1f}), indicating significant market fear.",
            SignalStrength.STRONG,
        )
    if value > 18:
        return _signal(SignalSentiment.BEARISH, f"VIX elevated ({value:.1f}).")
    if value < 12:
        return _signal(SignalSentiment.BULLISH, f"VIX low ({value:.1f}), market calm.")
    return _signal(SignalSentiment.NEUTRAL, f"VIX moderate ({value:.1f}).")


def _gdp_growth(value: float, direction: Direction) -> IndicatorSignal:
    if value > 3:
        return _signal(
            SignalSentiment.BULLISH,
            f"Strong GDP growth ({value}%) signals robust expansion.",
            SignalStrength.STRONG,
        )
    if value > 1.5:
        return _signal(SignalSentiment.BULLISH, f"Positive GDP growth ({value}%).")
    if value < 0:
        return _signal(
            SignalSentiment.BEARISH,
            f"Negative GDP growth ({value}%) signals contraction.",
            SignalStrength.STRONG,
        )
    if value < 1:
        return _signal(
            SignalSentiment.BEARISH, f"Slow GDP growth ({value}%).", SignalStrength.WEAK
        )
    return _signal(SignalSentiment.NEUTRAL, f"GDP growth is moderate ({value}%).")


def _rate_policy(value: float, direction: Direction) -> IndicatorSignal:
    if direction is Direction.INCREASE:
        return _signal(
            SignalSentiment.BEARISH, f"Fed Funds Rate increased to {value}%, tighter policy."
        )
    if direction is Direction.DECREASE:
        return _signal(
            SignalSentiment.BULLISH, f"Fed Funds Rate decreased to {value}%, looser policy."
        )
    return _signal(SignalSentiment.NEUTRAL, f"Fed Funds Rate stable at {value}%.")


_RULES = {
    "UNRATE": _unemployment,
    "U6RATE": _unemployment,
    "CPI_YOY_PCT": _inflation,
    "CORE_CPI_YOY_PCT": _inflation,
    "PCE_YOY_PCT": _inflation,
    "CORE_PCE_YOY_PCT": _inflation,
    "VIX": _vix,
    "GDP_GROWTH": _gdp_growth,
    "FEDFUNDS": _rate_policy,
}


def indicator_signal(
    indicator: IndicatorDescriptor,
    latest: TimeSeriesPoint | None,
    previous: TimeSeriesPoint | None = None,
) -> IndicatorSignal:
    """Interpret the latest reading of ``indicator``.

    Headline indicators have dedicated rules; calculated percent-change series
    are read by sign and everything else by direction of change.
    """
    if latest is None or latest.value is None:
        return _signal(SignalSentiment.NEUTRAL, "Not enough data to determine a signal.")

    value = latest.value
    direction = compare_values(value, previous.value if previous else None)

    rule = _RULES.get(indicator.id)
    if rule is not None:
        return rule(value, direction)

    name = indicator.name
    if indicator.calculation is not CalculationType.NONE and "%" in indicator.unit:
        if value > 0.1:
            return _signal(SignalSentiment.BULLISH, f"{name} shows positive change ({value:.2f}%).")
        if value < -0.1:
            return _signal(SignalSentiment.BEARISH, f"{name} shows negative change ({value:.2f}%).")
        return _signal(SignalSentiment.NEUTRAL, f"{name} shows minimal change ({value:.2f}%).")

    if direction is Direction.INCREASE:
        return _signal(SignalSentiment.BULLISH, f"{name} is increasing.")
    if direction is Direction.DECREASE:
        return _signal(SignalSentiment.BEARISH, f"{name} is decreasing.")
    return _signal(SignalSentiment.NEUTRAL, f"{name} shows no significant change.")
