"""Raw series providers."""

from econdash.infrastructure.data_providers.fred import FredSeriesProvider
from econdash.infrastructure.data_providers.mock import MockSeriesGenerator, seeded_random

__all__ = ["FredSeriesProvider", "MockSeriesGenerator", "seeded_random"]
