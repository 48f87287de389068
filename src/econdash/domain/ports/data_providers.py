"""Data provider interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from econdash.domain.models.series import RawObservation


class RawSeriesProvider(ABC):
    """Upstream source of raw time series (statistical agency, market data API, ...)."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Short identifier used in logs."""

    @abstractmethod
    async def is_available(self) -> bool:
        """Whether the provider is configured and reachable."""

    @abstractmethod
    async def get_time_series(
        self,
        series_id: str,
        start_date: date,
        end_date: date,
    ) -> list[RawObservation]:
        """Fetch raw observations for ``series_id`` between the two dates inclusive.

        Implementations may raise on transport or configuration errors; callers
        decide how to degrade.
        """
