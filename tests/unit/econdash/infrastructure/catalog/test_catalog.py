"""Unit tests for the indicator catalog."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from econdash.domain.exceptions import IndicatorNotFoundError
from econdash.domain.models.indicator import (
    CalculationType,
    Frequency,
    IndicatorCategory,
    IndicatorDescriptor,
)
from econdash.infrastructure.catalog.indicators import DEFAULT_INDICATORS, IndicatorCatalog


@pytest.mark.unit
class TestIndicatorCatalog:
    def test_default_catalog_covers_every_calculation_and_frequency(self) -> None:
        catalog = IndicatorCatalog()

        assert {i.calculation for i in catalog} == set(CalculationType)
        assert {i.frequency for i in catalog} == set(Frequency)
        assert {i.category for i in catalog} == set(IndicatorCategory)
        assert len(catalog) == len(DEFAULT_INDICATORS)

    def test_get_known_indicator(self) -> None:
        indicator = IndicatorCatalog().get("PAYEMS_MOM_CHG")

        assert indicator.calculation is CalculationType.MOM_CHANGE
        assert indicator.series_identifier == "PAYEMS"
        assert indicator.source_link == "https://fred.stlouisfed.org/series/PAYEMS"

    def test_get_unknown_indicator_raises(self) -> None:
        with pytest.raises(IndicatorNotFoundError) as exc_info:
            IndicatorCatalog().get("NOPE")

        assert exc_info.value.indicator_id == "NOPE"

    def test_find_unknown_returns_none(self) -> None:
        catalog = IndicatorCatalog()

        assert catalog.find("NOPE") is None
        assert "UNRATE" in catalog
        assert "NOPE" not in catalog

    def test_by_category(self) -> None:
        labor = IndicatorCatalog().by_category(IndicatorCategory.LABOR_MARKET)

        assert "UNRATE" in [i.id for i in labor]
        assert all(i.category is IndicatorCategory.LABOR_MARKET for i in labor)

    def test_custom_catalog(self) -> None:
        only = IndicatorDescriptor(id="X", name="X", unit="Index", frequency=Frequency.DAILY)

        catalog = IndicatorCatalog([only])

        assert catalog.ids() == ["X"]

    def test_duplicate_ids_rejected(self) -> None:
        entry = IndicatorDescriptor(id="X", name="X", unit="Index", frequency=Frequency.DAILY)

        with pytest.raises(ValueError):
            IndicatorCatalog([entry, entry])

    def test_descriptors_are_immutable(self) -> None:
        indicator = IndicatorCatalog().get("UNRATE")

        with pytest.raises(ValidationError):
            indicator.unit = "Index"  # type: ignore[misc]
