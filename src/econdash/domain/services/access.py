"""Feature-access gate.

Single authority for tier checks. Any code that returns favorites, alerts,
moving averages, comparison data or CSV exports asks ``can_access`` first.
The gate fails closed: unknown features and custom tiers are denied.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

import structlog

from econdash.domain.models.access import FeatureKey, SubscriptionTier

logger = structlog.get_logger(__name__)

_PAID = frozenset({SubscriptionTier.BASIC, SubscriptionTier.PRO})
_PRO_ONLY = frozenset({SubscriptionTier.PRO})

FEATURE_ACCESS: Mapping[FeatureKey, frozenset[SubscriptionTier]] = MappingProxyType(
    {
        FeatureKey.MOVING_AVERAGES: _PAID,
        FeatureKey.ADVANCED_STATS: _PRO_ONLY,
        FeatureKey.FAVORITES: _PAID,
        FeatureKey.INDICATOR_COMPARISON: _PRO_ONLY,
        FeatureKey.DATA_EXPORT: _PRO_ONLY,
        FeatureKey.ALERTS_BASIC_SETUP: _PAID,
    }
)


def resolve_tier(tier: SubscriptionTier | str | None) -> SubscriptionTier | None:
    """Map an incoming tier value to a known tier.

    None means free. Returns None for custom tiers.
    """
    if tier is None:
        return SubscriptionTier.FREE
    if isinstance(tier, SubscriptionTier):
        return tier
    try:
        return SubscriptionTier(str(tier).strip().lower())
    except ValueError:
        return None


def resolve_feature(feature_key: FeatureKey | str) -> FeatureKey | None:
    if isinstance(feature_key, FeatureKey):
        return feature_key
    try:
        return FeatureKey(str(feature_key))
    except ValueError:
        return None


class FeatureAccessPolicy:
    """Tier-to-feature access table."""

    def __init__(
        self, table: Mapping[FeatureKey, frozenset[SubscriptionTier]] | None = None
    ) -> None:
        self._table = MappingProxyType(dict(table if table is not None else FEATURE_ACCESS))

    def can_access(
        self, tier: SubscriptionTier | str | None, feature_key: FeatureKey | str
    ) -> bool:
        feature = resolve_feature(feature_key)
        allowed = self._table.get(feature) if feature is not None else None
        if allowed is None:
            logger.warning("Feature key missing from access table", feature_key=str(feature_key))
            return False

        effective = resolve_tier(tier)
        if effective is None:
            logger.debug("Custom tier has no feature grants", tier=str(tier))
            return False
        return effective in allowed

    def accessible_features(self, tier: SubscriptionTier | str | None) -> list[FeatureKey]:
        """Features granted to ``tier``, in table order."""
        return [feature for feature in self._table if self.can_access(tier, feature)]


default_policy = FeatureAccessPolicy()


def can_access(tier: SubscriptionTier | str | None, feature_key: FeatureKey | str) -> bool:
    """Whether ``tier`` may use ``feature_key`` under the default table."""
    return default_policy.can_access(tier, feature_key)
