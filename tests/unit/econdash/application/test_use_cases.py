"""Unit tests for indicator use cases."""

from __future__ import annotations

import io
from datetime import date
from typing import Any

import pandas as pd
import pytest

from econdash.application.orchestrator import IndicatorSeriesOrchestrator
from econdash.application.use_cases.indicators import (
    CompareIndicatorsRequest,
    CompareIndicatorsUseCase,
    EvaluateAlertsRequest,
    EvaluateAlertsUseCase,
    ExportIndicatorCsvRequest,
    ExportIndicatorCsvUseCase,
    GetDashboardRequest,
    GetDashboardUseCase,
    GetFavoritesRequest,
    GetFavoritesUseCase,
    GetIndicatorDataRequest,
    GetIndicatorDataUseCase,
)
from econdash.domain.exceptions import FeatureAccessDeniedError, IndicatorNotFoundError
from econdash.domain.models.access import FeatureKey
from econdash.domain.models.alerts import AlertCondition, AlertRule
from econdash.domain.models.indicator import IndicatorCategory
from econdash.domain.models.series import RawObservation
from econdash.infrastructure.catalog.indicators import IndicatorCatalog

TODAY = date(2024, 6, 15)


class _StubProvider:
    """Returns 24 monthly points ending June 2024 for every series."""

    def get_provider_name(self) -> str:
        return "stub"

    async def is_available(self) -> bool:
        return True

    async def get_time_series(
        self, series_id: str, start_date: date, end_date: date
    ) -> list[RawObservation]:
        dates = pd.date_range("2022-07-01", periods=24, freq="MS")
        return [
            RawObservation(date=d.strftime("%Y-%m-%d"), value=str(4 + i / 10))
            for i, d in enumerate(dates)
        ]


@pytest.fixture
def catalog() -> IndicatorCatalog:
    return IndicatorCatalog()


@pytest.fixture
def orchestrator() -> IndicatorSeriesOrchestrator:
    return IndicatorSeriesOrchestrator(_StubProvider(), today=lambda: TODAY)


@pytest.fixture
def dashboard(
    catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator
) -> GetDashboardUseCase:
    return GetDashboardUseCase(catalog, orchestrator)


@pytest.mark.unit
class TestGetIndicatorDataUseCase:
    @pytest.mark.asyncio
    async def test_free_tier_gets_series_without_extras(
        self, catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator
    ) -> None:
        use_case = GetIndicatorDataUseCase(catalog, orchestrator)

        response = await use_case.execute(GetIndicatorDataRequest(indicator_id="UNRATE"))

        assert len(response.view.series.points) == 12
        assert response.view.series.statistics.count == 12
        assert not response.moving_averages.granted
        assert response.moving_averages.data is None
        assert response.moving_averages.feature is FeatureKey.MOVING_AVERAGES
        assert not response.advanced_stats.granted

    @pytest.mark.asyncio
    async def test_basic_tier_gets_moving_averages(
        self, catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator
    ) -> None:
        use_case = GetIndicatorDataUseCase(catalog, orchestrator)

        response = await use_case.execute(
            GetIndicatorDataRequest(indicator_id="UNRATE", tier="basic", moving_average_windows=[3])
        )

        assert response.moving_averages.granted
        averages = response.moving_averages.data
        assert averages is not None
        assert len(averages[3]) == 10
        assert not response.advanced_stats.granted

    @pytest.mark.asyncio
    async def test_pro_tier_gets_period_change(
        self, catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator
    ) -> None:
        use_case = GetIndicatorDataUseCase(catalog, orchestrator)

        response = await use_case.execute(
            GetIndicatorDataRequest(indicator_id="UNRATE", tier="pro")
        )

        assert response.advanced_stats.granted
        change = response.advanced_stats.data
        assert change is not None
        assert change.absolute_change == 1.1

    @pytest.mark.asyncio
    async def test_recessions_in_requested_window(
        self, catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator
    ) -> None:
        use_case = GetIndicatorDataUseCase(catalog, orchestrator)

        response = await use_case.execute(
            GetIndicatorDataRequest(
                indicator_id="UNRATE", start_date=date(2019, 1, 1), end_date=date(2021, 1, 1)
            )
        )

        assert [r.id for r in response.recessions] == ["covid19"]

    @pytest.mark.asyncio
    async def test_unknown_indicator(
        self, catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator
    ) -> None:
        use_case = GetIndicatorDataUseCase(catalog, orchestrator)

        with pytest.raises(IndicatorNotFoundError):
            await use_case.execute(GetIndicatorDataRequest(indicator_id="NOPE"))


@pytest.mark.unit
class TestDashboardUseCases:
    @pytest.mark.asyncio
    async def test_category_dashboard(
        self, catalog: IndicatorCatalog, dashboard: GetDashboardUseCase
    ) -> None:
        response = await dashboard.execute(
            GetDashboardRequest(category=IndicatorCategory.LABOR_MARKET)
        )

        expected = [i.id for i in catalog.by_category(IndicatorCategory.LABOR_MARKET)]
        assert [v.indicator.id for v in response.views] == expected

    @pytest.mark.asyncio
    async def test_favorites_require_paid_tier(self, dashboard: GetDashboardUseCase) -> None:
        use_case = GetFavoritesUseCase(dashboard)

        denied = await use_case.execute(GetFavoritesRequest(indicator_ids=["UNRATE"]))
        granted = await use_case.execute(
            GetFavoritesRequest(indicator_ids=["UNRATE", "FEDFUNDS"], tier="basic")
        )

        assert not denied.favorites.granted
        assert denied.favorites.reason
        assert granted.favorites.granted
        assert [v.indicator.id for v in granted.favorites.data or []] == ["UNRATE", "FEDFUNDS"]

    @pytest.mark.asyncio
    async def test_comparison_is_pro_only(self, dashboard: GetDashboardUseCase) -> None:
        use_case = CompareIndicatorsUseCase(dashboard)
        ids = ["UNRATE", "FEDFUNDS"]

        basic = await use_case.execute(CompareIndicatorsRequest(indicator_ids=ids, tier="basic"))
        pro = await use_case.execute(CompareIndicatorsRequest(indicator_ids=ids, tier="pro"))

        assert not basic.comparison.granted
        assert pro.comparison.granted
        assert pro.comparison.metadata["indicator_count"] == 2


@pytest.mark.unit
class TestExportIndicatorCsvUseCase:
    @pytest.mark.asyncio
    async def test_pro_export(
        self, catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator
    ) -> None:
        use_case = ExportIndicatorCsvUseCase(catalog, orchestrator)

        response = await use_case.execute(
            ExportIndicatorCsvRequest(indicator_id="UNRATE", tier="pro")
        )

        frame = pd.read_csv(io.StringIO(response.content))
        assert list(frame.columns) == ["date", "value"]
        assert response.rows == len(frame) == 12
        assert frame["date"].iloc[0] == "2023-07-01"
        assert response.filename == "UNRATE_2023-06-15_2024-06-15.csv"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tier", [None, "free", "basic", "enterprise"])
    async def test_export_denied(
        self,
        catalog: IndicatorCatalog,
        orchestrator: IndicatorSeriesOrchestrator,
        tier: str | None,
    ) -> None:
        use_case = ExportIndicatorCsvUseCase(catalog, orchestrator)

        with pytest.raises(FeatureAccessDeniedError):
            await use_case.execute(ExportIndicatorCsvRequest(indicator_id="UNRATE", tier=tier))


def _rules(count: int, **overrides: Any) -> list[AlertRule]:
    fields = {"indicator_id": "UNRATE", "target_value": 5.0, "condition": AlertCondition.ABOVE}
    fields.update(overrides)
    return [AlertRule(**fields) for _ in range(count)]


@pytest.mark.unit
class TestEvaluateAlertsUseCase:
    @pytest.mark.asyncio
    async def test_free_tier_denied(
        self, catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator
    ) -> None:
        use_case = EvaluateAlertsUseCase(catalog, orchestrator)

        response = await use_case.execute(EvaluateAlertsRequest(rules=_rules(1)))

        assert not response.evaluations.granted

    @pytest.mark.asyncio
    async def test_basic_tier_evaluates_up_to_limit(
        self, catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator
    ) -> None:
        use_case = EvaluateAlertsUseCase(catalog, orchestrator)

        response = await use_case.execute(EvaluateAlertsRequest(rules=_rules(7), tier="basic"))

        result = response.evaluations
        assert result.granted
        assert len(result.data or []) == 5
        assert result.metadata == {"limit": 5, "skipped": 2}
        assert all(e.triggered for e in result.data or [])

    @pytest.mark.asyncio
    async def test_below_rule_not_triggered(
        self, catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator
    ) -> None:
        use_case = EvaluateAlertsUseCase(catalog, orchestrator)

        response = await use_case.execute(
            EvaluateAlertsRequest(
                rules=_rules(1, condition=AlertCondition.BELOW, target_value=1.0), tier="pro"
            )
        )

        evaluation = (response.evaluations.data or [])[0]
        assert not evaluation.triggered
        assert evaluation.latest is not None
        assert evaluation.latest.value == 6.3
