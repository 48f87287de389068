"""Unit tests for the feature-access gate."""

from __future__ import annotations

import pytest

from econdash.domain.models.access import FeatureKey, SubscriptionTier
from econdash.domain.services.access import (
    FEATURE_ACCESS,
    FeatureAccessPolicy,
    can_access,
    resolve_tier,
)


@pytest.mark.unit
class TestCanAccess:
    @pytest.mark.parametrize("feature", list(FeatureKey))
    def test_missing_tier_is_free(self, feature: FeatureKey) -> None:
        assert can_access(None, feature) == can_access("free", feature)

    def test_free_tier_gets_nothing(self) -> None:
        assert not any(can_access(SubscriptionTier.FREE, f) for f in FeatureKey)

    @pytest.mark.parametrize(
        ("tier", "feature", "expected"),
        [
            ("basic", FeatureKey.MOVING_AVERAGES, True),
            ("basic", FeatureKey.FAVORITES, True),
            ("basic", FeatureKey.ALERTS_BASIC_SETUP, True),
            ("basic", FeatureKey.ADVANCED_STATS, False),
            ("basic", FeatureKey.INDICATOR_COMPARISON, False),
            ("basic", FeatureKey.DATA_EXPORT, False),
            ("pro", FeatureKey.ADVANCED_STATS, True),
            ("pro", FeatureKey.INDICATOR_COMPARISON, True),
            ("pro", FeatureKey.DATA_EXPORT, True),
        ],
    )
    def test_access_table(self, tier: str, feature: FeatureKey, expected: bool) -> None:
        assert can_access(tier, feature) is expected

    def test_accepts_string_feature_keys(self) -> None:
        assert can_access("pro", "DATA_EXPORT")

    def test_unknown_feature_is_denied(self) -> None:
        assert can_access("pro", "UNKNOWN_KEY") is False

    def test_custom_tier_is_denied(self) -> None:
        assert can_access("enterprise", FeatureKey.FAVORITES) is False

    def test_tier_is_case_insensitive(self) -> None:
        assert can_access(" PRO ", FeatureKey.DATA_EXPORT)


@pytest.mark.unit
class TestFeatureAccessPolicy:
    def test_table_covers_every_feature(self) -> None:
        assert set(FEATURE_ACCESS) == set(FeatureKey)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            FEATURE_ACCESS[FeatureKey.FAVORITES] = frozenset()  # type: ignore[index]

    def test_feature_missing_from_custom_table_is_denied(self) -> None:
        policy = FeatureAccessPolicy({FeatureKey.FAVORITES: frozenset({SubscriptionTier.FREE})})

        assert policy.can_access(None, FeatureKey.FAVORITES)
        assert not policy.can_access("pro", FeatureKey.DATA_EXPORT)

    def test_accessible_features(self) -> None:
        policy = FeatureAccessPolicy()

        assert policy.accessible_features("free") == []
        assert set(policy.accessible_features("basic")) == {
            FeatureKey.MOVING_AVERAGES,
            FeatureKey.FAVORITES,
            FeatureKey.ALERTS_BASIC_SETUP,
        }
        assert set(policy.accessible_features("pro")) == set(FeatureKey)

    def test_resolve_tier(self) -> None:
        assert resolve_tier(None) is SubscriptionTier.FREE
        assert resolve_tier("basic") is SubscriptionTier.BASIC
        assert resolve_tier("gold") is None
