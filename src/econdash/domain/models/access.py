"""Subscription tier and feature-key domain models."""

from enum import Enum


class SubscriptionTier(str, Enum):
    """Known subscription plans.

    Tier values arriving from billing that are not listed here are custom
    tiers; they match no entry in the access table.
    """

    FREE = "free"
    BASIC = "basic"
    PRO = "pro"


class FeatureKey(str, Enum):
    MOVING_AVERAGES = "MOVING_AVERAGES"
    ADVANCED_STATS = "ADVANCED_STATS"
    FAVORITES = "FAVORITES"
    INDICATOR_COMPARISON = "INDICATOR_COMPARISON"
    DATA_EXPORT = "DATA_EXPORT"
    ALERTS_BASIC_SETUP = "ALERTS_BASIC_SETUP"
