"""Pure domain services: validation, statistics, transforms and access policy."""

from econdash.domain.services.access import FeatureAccessPolicy, can_access
from econdash.domain.services.alerts import alert_limit_for, evaluate_alert
from econdash.domain.services.signals import indicator_signal
from econdash.domain.services.statistics import calculate_statistics, period_change
from econdash.domain.services.transforms import (
    lookback_periods_for,
    mom_change,
    mom_percent,
    moving_average,
    qoq_percent,
    yoy_percent,
    yoy_percent_by_calendar,
)
from econdash.domain.services.validation import sort_series, validate_series

__all__ = [
    "validate_series",
    "sort_series",
    "calculate_statistics",
    "period_change",
    "yoy_percent",
    "yoy_percent_by_calendar",
    "mom_percent",
    "qoq_percent",
    "mom_change",
    "moving_average",
    "lookback_periods_for",
    "FeatureAccessPolicy",
    "can_access",
    "indicator_signal",
    "evaluate_alert",
    "alert_limit_for",
]
