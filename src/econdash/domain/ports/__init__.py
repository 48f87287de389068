"""Ports (interfaces) implemented by infrastructure adapters."""

from econdash.domain.ports.data_providers import RawSeriesProvider

__all__ = ["RawSeriesProvider"]
