"""Value-threshold alert models."""

from enum import Enum

from pydantic import Field

from econdash.domain.models.base import ValueObject
from econdash.domain.models.series import TimeSeriesPoint


class AlertCondition(str, Enum):
    ABOVE = "ABOVE"
    BELOW = "BELOW"


class AlertRule(ValueObject):
    """User-defined threshold on an indicator's latest value."""

    indicator_id: str = Field(..., min_length=1)
    target_value: float
    condition: AlertCondition
    is_enabled: bool = True


class AlertEvaluation(ValueObject):
    rule: AlertRule
    triggered: bool
    latest: TimeSeriesPoint | None = None
