"""Indicator signal models."""

from enum import Enum

from econdash.domain.models.base import ValueObject


class SignalSentiment(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"
    MIXED = "mixed"


class SignalStrength(str, Enum):
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"


class IndicatorSignal(ValueObject):
    """Short interpretation of the latest reading of an indicator."""

    sentiment: SignalSentiment
    message: str
    strength: SignalStrength | None = None
