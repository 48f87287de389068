"""Static reference data: indicator catalog and recession periods."""

from econdash.infrastructure.catalog.indicators import DEFAULT_INDICATORS, IndicatorCatalog
from econdash.infrastructure.catalog.recessions import (
    US_RECESSION_PERIODS,
    RecessionPeriod,
    recessions_in_window,
)

__all__ = [
    "DEFAULT_INDICATORS",
    "IndicatorCatalog",
    "RecessionPeriod",
    "US_RECESSION_PERIODS",
    "recessions_in_window",
]
