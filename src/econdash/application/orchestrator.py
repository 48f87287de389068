"""Fetch-and-transform orchestration for indicator series."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable, Sequence
from datetime import date, timedelta

import structlog

from econdash.domain.models.indicator import (
    ApiSource,
    CalculationType,
    IndicatorDescriptor,
)
from econdash.domain.models.series import (
    DateWindow,
    IndicatorSeries,
    SeriesSource,
    TimeSeriesPoint,
)
from econdash.domain.ports.data_providers import RawSeriesProvider
from econdash.domain.services.statistics import calculate_statistics
from econdash.domain.services.transforms import (
    lookback_periods_for,
    mom_change,
    mom_percent,
    qoq_percent,
    yoy_percent,
    yoy_percent_by_calendar,
)
from econdash.domain.services.validation import sort_series, validate_series
from econdash.infrastructure.data_providers.mock import MockSeriesGenerator

logger = structlog.get_logger(__name__)

Transform = Callable[[Sequence[TimeSeriesPoint], IndicatorDescriptor], list[TimeSeriesPoint]]


def _yoy(series: Sequence[TimeSeriesPoint], indicator: IndicatorDescriptor) -> list[TimeSeriesPoint]:
    lookback = lookback_periods_for(indicator.frequency)
    if lookback is None:
        return yoy_percent_by_calendar(series)
    return yoy_percent(series, lookback)


TRANSFORMS: dict[CalculationType, Transform] = {
    CalculationType.YOY_PERCENT: _yoy,
    CalculationType.MOM_PERCENT: lambda series, _: mom_percent(series),
    CalculationType.QOQ_PERCENT: lambda series, _: qoq_percent(series),
    CalculationType.MOM_CHANGE: lambda series, _: mom_change(series),
}

# Extra history fetched ahead of the requested start, per calculation.
WIDEN_YEARS: dict[CalculationType, int] = {CalculationType.YOY_PERCENT: 1}

# Calendar lookbacks need a base on or before ``date - 365d``; daily feeds skip
# weekends and holidays, so the fetch reaches this many days further back.
CALENDAR_LOOKBACK_PADDING_DAYS = 7


def fetch_window_for(indicator: IndicatorDescriptor, requested: DateWindow) -> DateWindow:
    """Widen ``requested`` so the indicator's calculation has a base for its first point."""
    window = requested.widen_years(WIDEN_YEARS.get(indicator.calculation, 0))
    if (
        indicator.calculation == CalculationType.YOY_PERCENT
        and lookback_periods_for(indicator.frequency) is None
        and window.start is not None
    ):
        window = DateWindow(
            start=window.start - timedelta(days=CALENDAR_LOOKBACK_PADDING_DAYS), end=window.end
        )
    return window


class IndicatorSeriesOrchestrator:
    """Turns an indicator descriptor and a date window into a display-ready series.

    The upstream provider is the only collaborator that does I/O. Any failure
    or empty answer from it degrades to the seeded mock generator, so callers
    always get a series back; ``IndicatorSeries.source`` says which path was
    taken.
    """

    def __init__(
        self,
        provider: RawSeriesProvider,
        mock_generator: MockSeriesGenerator | None = None,
        default_window_years: int = 1,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._provider = provider
        self._mock_generator = mock_generator or MockSeriesGenerator()
        self._default_window_years = default_window_years
        self._today = today

    async def fetch(
        self, indicator: IndicatorDescriptor, window: DateWindow | None = None
    ) -> IndicatorSeries:
        """Fetch, validate, transform and narrow the series for ``indicator``.

        Args:
            indicator: Catalog entry to load
            window: Requested range; open bounds default to the last year

        Returns:
            IndicatorSeries tagged fetched, mock or empty
        """
        requested_in = window or DateWindow()
        requested = requested_in.resolve(self._today(), self._default_window_years)
        if requested_in.start and requested_in.end and requested_in.start > requested_in.end:
            logger.warning(
                "Start date after end date; using default window",
                indicator_id=indicator.id,
                start=requested_in.start.isoformat(),
                end=requested_in.end.isoformat(),
            )

        fetch_window = fetch_window_for(indicator, requested)
        series, source = await self._load_series(indicator, fetch_window)
        series = self._apply_calculation(indicator, series)
        points = [p for p in series if requested.contains(p.date)]

        if not points:
            source = SeriesSource.EMPTY
        logger.info(
            "Indicator series ready",
            indicator_id=indicator.id,
            source=source.value,
            points=len(points),
            start=requested.start.isoformat() if requested.start else None,
            end=requested.end.isoformat() if requested.end else None,
        )
        return IndicatorSeries(
            indicator_id=indicator.id,
            points=points,
            statistics=calculate_statistics(points),
            source=source,
            requested_window=requested,
            fetch_window=fetch_window,
        )

    async def fetch_many(
        self, indicators: Iterable[IndicatorDescriptor], window: DateWindow | None = None
    ) -> list[IndicatorSeries]:
        """Fetch several indicators concurrently, preserving input order."""
        return list(await asyncio.gather(*(self.fetch(i, window) for i in indicators)))

    def _mock(
        self, indicator: IndicatorDescriptor, fetch_window: DateWindow
    ) -> tuple[list[TimeSeriesPoint], SeriesSource]:
        raw = self._mock_generator.generate(indicator, fetch_window)
        return sort_series(validate_series(raw)), SeriesSource.MOCK

    async def _load_series(
        self, indicator: IndicatorDescriptor, fetch_window: DateWindow
    ) -> tuple[list[TimeSeriesPoint], SeriesSource]:
        if indicator.api_source is ApiSource.MOCK:
            logger.debug("Indicator configured for mock data", indicator_id=indicator.id)
            return self._mock(indicator, fetch_window)

        provider_name = self._provider.get_provider_name()
        try:
            raw = await self._provider.get_time_series(
                indicator.series_identifier,
                fetch_window.start,  # type: ignore[arg-type]
                fetch_window.end,  # type: ignore[arg-type]
            )
        except Exception as e:
            logger.warning(
                "Upstream fetch failed; falling back to mock data",
                indicator_id=indicator.id,
                provider=provider_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return self._mock(indicator, fetch_window)

        series = sort_series(validate_series(raw))
        if not series:
            logger.warning(
                "Upstream returned no usable data; falling back to mock data",
                indicator_id=indicator.id,
                provider=provider_name,
                raw_points=len(raw or []),
            )
            return self._mock(indicator, fetch_window)
        return series, SeriesSource.FETCHED

    def _apply_calculation(
        self, indicator: IndicatorDescriptor, series: list[TimeSeriesPoint]
    ) -> list[TimeSeriesPoint]:
        calculation = indicator.calculation
        if calculation == CalculationType.NONE or not series:
            return series

        transform = TRANSFORMS.get(calculation)
        if transform is None:
            logger.warning(
                "Unknown calculation type; returning raw series",
                indicator_id=indicator.id,
                calculation=str(calculation),
            )
            return series

        transformed = transform(series, indicator)
        logger.debug(
            "Applied calculation",
            indicator_id=indicator.id,
            calculation=calculation.value,
            raw_points=len(series),
            points=len(transformed),
        )
        return transformed
