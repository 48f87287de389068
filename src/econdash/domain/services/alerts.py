"""Threshold alert evaluation."""

from __future__ import annotations

from collections.abc import Sequence

from econdash.domain.models.access import SubscriptionTier
from econdash.domain.models.alerts import AlertCondition, AlertEvaluation, AlertRule
from econdash.domain.models.series import TimeSeriesPoint
from econdash.domain.services.access import resolve_tier
from econdash.domain.services.validation import is_number

ALERT_LIMITS: dict[SubscriptionTier, int] = {
    SubscriptionTier.FREE: 0,
    SubscriptionTier.BASIC: 5,
    SubscriptionTier.PRO: 20,
}


def alert_limit_for(tier: SubscriptionTier | str | None) -> int:
    """Maximum number of alerts a tier may keep; 0 for custom tiers."""
    effective = resolve_tier(tier)
    if effective is None:
        return 0
    return ALERT_LIMITS.get(effective, 0)


def evaluate_alert(rule: AlertRule, series: Sequence[TimeSeriesPoint]) -> AlertEvaluation:
    """Check ``rule`` against the latest numeric point of ``series``.

    Disabled rules and series without a numeric point never trigger.
    """
    latest = next((p for p in reversed(series) if is_number(p.value)), None)
    if latest is None or not rule.is_enabled:
        return AlertEvaluation(rule=rule, triggered=False, latest=latest)

    if rule.condition is AlertCondition.ABOVE:
        triggered = latest.value > rule.target_value
    else:
        triggered = latest.value < rule.target_value
    return AlertEvaluation(rule=rule, triggered=triggered, latest=latest)
