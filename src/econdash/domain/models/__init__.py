"""Domain models for econdash."""

from econdash.domain.models.access import FeatureKey, SubscriptionTier
from econdash.domain.models.alerts import AlertCondition, AlertEvaluation, AlertRule
from econdash.domain.models.base import ValueObject
from econdash.domain.models.gated import GatedResult
from econdash.domain.models.indicator import (
    CATEGORY_NAMES,
    ApiSource,
    CalculationType,
    ChartShape,
    Frequency,
    IndicatorCategory,
    IndicatorDescriptor,
)
from econdash.domain.models.series import (
    DateWindow,
    IndicatorSeries,
    RawObservation,
    SeriesSource,
    PeriodChange,
    SeriesStatistics,
    TimeSeriesPoint,
)
from econdash.domain.models.signals import IndicatorSignal, SignalSentiment, SignalStrength

__all__ = [
    "ValueObject",
    # Series
    "TimeSeriesPoint",
    "RawObservation",
    "SeriesStatistics",
    "PeriodChange",
    "DateWindow",
    "SeriesSource",
    "IndicatorSeries",
    # Catalog
    "Frequency",
    "CalculationType",
    "ChartShape",
    "ApiSource",
    "IndicatorCategory",
    "CATEGORY_NAMES",
    "IndicatorDescriptor",
    # Access
    "SubscriptionTier",
    "FeatureKey",
    "GatedResult",
    # Insights
    "IndicatorSignal",
    "SignalSentiment",
    "SignalStrength",
    "AlertCondition",
    "AlertRule",
    "AlertEvaluation",
]
