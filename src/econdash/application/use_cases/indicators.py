"""Indicator use cases.

Every tier-dependent piece of output goes through ``FeatureAccessPolicy``
before it is computed.
"""

from __future__ import annotations

from datetime import date

import pandas as pd  # type: ignore[import-untyped]
import structlog
from pydantic import BaseModel, Field

from econdash.application.orchestrator import IndicatorSeriesOrchestrator
from econdash.application.use_cases.base import UseCase
from econdash.domain.exceptions import FeatureAccessDeniedError
from econdash.domain.models.access import FeatureKey
from econdash.domain.models.alerts import AlertEvaluation, AlertRule
from econdash.domain.models.gated import GatedResult
from econdash.domain.models.indicator import IndicatorCategory, IndicatorDescriptor
from econdash.domain.models.series import (
    DateWindow,
    IndicatorSeries,
    PeriodChange,
    TimeSeriesPoint,
)
from econdash.domain.models.signals import IndicatorSignal
from econdash.domain.services.access import FeatureAccessPolicy, default_policy
from econdash.domain.services.alerts import alert_limit_for, evaluate_alert
from econdash.domain.services.signals import indicator_signal
from econdash.domain.services.statistics import period_change
from econdash.domain.services.transforms import moving_average
from econdash.infrastructure.catalog.indicators import IndicatorCatalog
from econdash.infrastructure.catalog.recessions import RecessionPeriod, recessions_in_window

logger = structlog.get_logger(__name__)


def _window(start_date: date | None, end_date: date | None) -> DateWindow:
    return DateWindow(start=start_date, end=end_date)


class IndicatorView(BaseModel):
    """One indicator's series with its interpretation."""

    indicator: IndicatorDescriptor
    series: IndicatorSeries
    signal: IndicatorSignal


def _view(indicator: IndicatorDescriptor, series: IndicatorSeries) -> IndicatorView:
    return IndicatorView(
        indicator=indicator,
        series=series,
        signal=indicator_signal(indicator, series.latest, series.previous),
    )


MovingAverages = GatedResult[dict[int, list[TimeSeriesPoint]]]
PeriodChangeResult = GatedResult[PeriodChange]
ViewsResult = GatedResult[list[IndicatorView]]
EvaluationsResult = GatedResult[list[AlertEvaluation]]


class GetIndicatorDataRequest(BaseModel):
    """Request model for loading one indicator."""

    indicator_id: str = Field(..., description="Catalog id")
    start_date: date | None = Field(default=None, description="Window start")
    end_date: date | None = Field(default=None, description="Window end")
    tier: str | None = Field(default=None, description="Subscription tier of the caller")
    moving_average_windows: list[int] | None = Field(
        default=None, description="Window sizes; defaults to the configured windows"
    )


class GetIndicatorDataResponse(BaseModel):
    """Response model for loading one indicator."""

    view: IndicatorView
    moving_averages: MovingAverages
    advanced_stats: PeriodChangeResult
    recessions: list[RecessionPeriod] = Field(default_factory=list)


class GetIndicatorDataUseCase(UseCase[GetIndicatorDataRequest, GetIndicatorDataResponse]):
    """Load an indicator's series, statistics, signal and tier-gated extras."""

    def __init__(
        self,
        catalog: IndicatorCatalog,
        orchestrator: IndicatorSeriesOrchestrator,
        access_policy: FeatureAccessPolicy = default_policy,
        default_moving_average_windows: list[int] | None = None,
    ) -> None:
        self._catalog = catalog
        self._orchestrator = orchestrator
        self._access_policy = access_policy
        self._default_windows = default_moving_average_windows or [3, 6, 12]

    async def execute(self, request: GetIndicatorDataRequest) -> GetIndicatorDataResponse:
        indicator = self._catalog.get(request.indicator_id)
        series = await self._orchestrator.fetch(
            indicator, _window(request.start_date, request.end_date)
        )

        if self._access_policy.can_access(request.tier, FeatureKey.MOVING_AVERAGES):
            windows = request.moving_average_windows or self._default_windows
            moving_averages = MovingAverages(
                granted=True,
                feature=FeatureKey.MOVING_AVERAGES,
                data={w: moving_average(series.points, w) for w in windows},
            )
        else:
            moving_averages = MovingAverages.denied(FeatureKey.MOVING_AVERAGES, request.tier)

        if self._access_policy.can_access(request.tier, FeatureKey.ADVANCED_STATS):
            advanced_stats = PeriodChangeResult(
                granted=True,
                feature=FeatureKey.ADVANCED_STATS,
                data=period_change(series.points),
            )
        else:
            advanced_stats = PeriodChangeResult.denied(FeatureKey.ADVANCED_STATS, request.tier)

        window = series.requested_window
        return GetIndicatorDataResponse(
            view=_view(indicator, series),
            moving_averages=moving_averages,
            advanced_stats=advanced_stats,
            recessions=recessions_in_window(window.start, window.end),
        )


class GetDashboardRequest(BaseModel):
    """Request model for a dashboard of indicators."""

    category: IndicatorCategory | None = Field(default=None, description="Section to load")
    indicator_ids: list[str] | None = Field(
        default=None, description="Explicit ids; takes precedence over category"
    )
    start_date: date | None = None
    end_date: date | None = None


class GetDashboardResponse(BaseModel):
    """Response model for a dashboard of indicators."""

    views: list[IndicatorView] = Field(default_factory=list)


class GetDashboardUseCase(UseCase[GetDashboardRequest, GetDashboardResponse]):
    """Load many indicators concurrently."""

    def __init__(self, catalog: IndicatorCatalog, orchestrator: IndicatorSeriesOrchestrator) -> None:
        self._catalog = catalog
        self._orchestrator = orchestrator

    def _select(self, request: GetDashboardRequest) -> list[IndicatorDescriptor]:
        if request.indicator_ids:
            return [self._catalog.get(i) for i in request.indicator_ids]
        if request.category is not None:
            return self._catalog.by_category(request.category)
        return list(self._catalog)

    async def execute(self, request: GetDashboardRequest) -> GetDashboardResponse:
        indicators = self._select(request)
        all_series = await self._orchestrator.fetch_many(
            indicators, _window(request.start_date, request.end_date)
        )
        logger.info("Dashboard loaded", indicators=len(indicators))
        return GetDashboardResponse(
            views=[_view(i, s) for i, s in zip(indicators, all_series)]
        )


class GetFavoritesRequest(BaseModel):
    """Request model for a user's favorite indicators.

    Favorites are stored by the caller; only their ids are passed in.
    """

    indicator_ids: list[str] = Field(default_factory=list)
    tier: str | None = None
    start_date: date | None = None
    end_date: date | None = None


class GetFavoritesResponse(BaseModel):
    favorites: ViewsResult


class GetFavoritesUseCase(UseCase[GetFavoritesRequest, GetFavoritesResponse]):
    """Load the caller's favorite indicators when their tier allows favorites."""

    def __init__(
        self,
        dashboard: GetDashboardUseCase,
        access_policy: FeatureAccessPolicy = default_policy,
    ) -> None:
        self._dashboard = dashboard
        self._access_policy = access_policy

    async def execute(self, request: GetFavoritesRequest) -> GetFavoritesResponse:
        if not self._access_policy.can_access(request.tier, FeatureKey.FAVORITES):
            return GetFavoritesResponse(
                favorites=ViewsResult.denied(FeatureKey.FAVORITES, request.tier)
            )
        if not request.indicator_ids:
            return GetFavoritesResponse(
                favorites=ViewsResult(granted=True, feature=FeatureKey.FAVORITES, data=[])
            )

        dashboard = await self._dashboard.execute(
            GetDashboardRequest(
                indicator_ids=request.indicator_ids,
                start_date=request.start_date,
                end_date=request.end_date,
            )
        )
        return GetFavoritesResponse(
            favorites=ViewsResult(
                granted=True, feature=FeatureKey.FAVORITES, data=dashboard.views
            )
        )


class CompareIndicatorsRequest(BaseModel):
    """Request model for the comparison tool."""

    indicator_ids: list[str] = Field(..., min_length=2, description="Indicators to overlay")
    start_date: date | None = None
    end_date: date | None = None
    tier: str | None = None


class CompareIndicatorsResponse(BaseModel):
    comparison: ViewsResult


class CompareIndicatorsUseCase(UseCase[CompareIndicatorsRequest, CompareIndicatorsResponse]):
    """Load several indicators over a shared window for side-by-side charts."""

    def __init__(
        self,
        dashboard: GetDashboardUseCase,
        access_policy: FeatureAccessPolicy = default_policy,
    ) -> None:
        self._dashboard = dashboard
        self._access_policy = access_policy

    async def execute(self, request: CompareIndicatorsRequest) -> CompareIndicatorsResponse:
        if not self._access_policy.can_access(request.tier, FeatureKey.INDICATOR_COMPARISON):
            return CompareIndicatorsResponse(
                comparison=ViewsResult.denied(FeatureKey.INDICATOR_COMPARISON, request.tier)
            )

        dashboard = await self._dashboard.execute(
            GetDashboardRequest(
                indicator_ids=request.indicator_ids,
                start_date=request.start_date,
                end_date=request.end_date,
            )
        )
        return CompareIndicatorsResponse(
            comparison=ViewsResult(
                granted=True,
                feature=FeatureKey.INDICATOR_COMPARISON,
                data=dashboard.views,
                metadata={"indicator_count": len(dashboard.views)},
            )
        )


class ExportIndicatorCsvRequest(BaseModel):
    """Request model for exporting an indicator as CSV."""

    indicator_id: str
    start_date: date | None = None
    end_date: date | None = None
    tier: str | None = None


class ExportIndicatorCsvResponse(BaseModel):
    indicator_id: str
    filename: str
    content: str
    rows: int


class ExportIndicatorCsvUseCase(UseCase[ExportIndicatorCsvRequest, ExportIndicatorCsvResponse]):
    """Render an indicator's final series as CSV text.

    Raises:
        FeatureAccessDeniedError: If the tier may not export data
        IndicatorNotFoundError: If the indicator is not in the catalog
    """

    def __init__(
        self,
        catalog: IndicatorCatalog,
        orchestrator: IndicatorSeriesOrchestrator,
        access_policy: FeatureAccessPolicy = default_policy,
    ) -> None:
        self._catalog = catalog
        self._orchestrator = orchestrator
        self._access_policy = access_policy

    async def execute(self, request: ExportIndicatorCsvRequest) -> ExportIndicatorCsvResponse:
        if not self._access_policy.can_access(request.tier, FeatureKey.DATA_EXPORT):
            raise FeatureAccessDeniedError(FeatureKey.DATA_EXPORT.value, request.tier)

        indicator = self._catalog.get(request.indicator_id)
        series = await self._orchestrator.fetch(
            indicator, _window(request.start_date, request.end_date)
        )

        frame = pd.DataFrame(
            {
                "date": [p.date.isoformat() for p in series.points],
                "value": [p.value for p in series.points],
            },
            columns=["date", "value"],
        )
        window = series.requested_window
        filename = f"{indicator.id}_{window.start}_{window.end}.csv"
        logger.info(
            "Exported indicator series",
            indicator_id=indicator.id,
            rows=len(frame),
            source=series.source.value,
        )
        return ExportIndicatorCsvResponse(
            indicator_id=indicator.id,
            filename=filename,
            content=frame.to_csv(index=False),
            rows=len(frame),
        )


class EvaluateAlertsRequest(BaseModel):
    """Request model for checking a user's alert rules."""

    rules: list[AlertRule] = Field(default_factory=list)
    tier: str | None = None


class EvaluateAlertsResponse(BaseModel):
    evaluations: EvaluationsResult


class EvaluateAlertsUseCase(UseCase[EvaluateAlertsRequest, EvaluateAlertsResponse]):
    """Evaluate alert rules against each indicator's latest value.

    Rules beyond the tier's alert limit are not evaluated and are counted in
    the result metadata as ``skipped``.
    """

    def __init__(
        self,
        catalog: IndicatorCatalog,
        orchestrator: IndicatorSeriesOrchestrator,
        access_policy: FeatureAccessPolicy = default_policy,
    ) -> None:
        self._catalog = catalog
        self._orchestrator = orchestrator
        self._access_policy = access_policy

    async def execute(self, request: EvaluateAlertsRequest) -> EvaluateAlertsResponse:
        if not self._access_policy.can_access(request.tier, FeatureKey.ALERTS_BASIC_SETUP):
            return EvaluateAlertsResponse(
                evaluations=EvaluationsResult.denied(FeatureKey.ALERTS_BASIC_SETUP, request.tier)
            )

        limit = alert_limit_for(request.tier)
        rules = request.rules[:limit]
        indicator_ids = list(dict.fromkeys(rule.indicator_id for rule in rules))
        indicators = [self._catalog.get(i) for i in indicator_ids]
        all_series = await self._orchestrator.fetch_many(indicators)
        by_id = {s.indicator_id: s.points for s in all_series}

        evaluations = [evaluate_alert(rule, by_id[rule.indicator_id]) for rule in rules]
        triggered = sum(1 for e in evaluations if e.triggered)
        logger.info(
            "Alerts evaluated",
            evaluated=len(evaluations),
            triggered=triggered,
            skipped=len(request.rules) - len(rules),
        )
        return EvaluateAlertsResponse(
            evaluations=EvaluationsResult(
                granted=True,
                feature=FeatureKey.ALERTS_BASIC_SETUP,
                data=evaluations,
                metadata={"limit": limit, "skipped": len(request.rules) - len(rules)},
            )
        )
