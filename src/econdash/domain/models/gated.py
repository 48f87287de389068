"""Result wrapper for tier-gated use case outputs."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from econdash.domain.models.access import FeatureKey

T = TypeVar("T")


class GatedResult(BaseModel, Generic[T]):
    """Result of a gated operation: data when granted, an upgrade hint when not."""

    granted: bool = Field(..., description="Whether the tier may use the feature")
    data: T | None = Field(default=None, description="Payload when access is granted")
    feature: FeatureKey | None = Field(default=None, description="Feature that was checked")
    reason: str | None = Field(default=None, description="Why access was denied")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Additional metadata")

    @classmethod
    def denied(cls, feature: FeatureKey, tier: str | None) -> GatedResult[T]:
        return cls(
            granted=False,
            feature=feature,
            reason=f"Tier '{tier or 'free'}' cannot use {feature.value}; upgrade required",
        )
