"""Application use cases."""

from econdash.application.use_cases.base import UseCase
from econdash.application.use_cases.indicators import (
    CompareIndicatorsRequest,
    CompareIndicatorsResponse,
    CompareIndicatorsUseCase,
    EvaluateAlertsRequest,
    EvaluateAlertsResponse,
    EvaluateAlertsUseCase,
    ExportIndicatorCsvRequest,
    ExportIndicatorCsvResponse,
    ExportIndicatorCsvUseCase,
    GetDashboardRequest,
    GetDashboardResponse,
    GetDashboardUseCase,
    GetFavoritesRequest,
    GetFavoritesResponse,
    GetFavoritesUseCase,
    GetIndicatorDataRequest,
    GetIndicatorDataResponse,
    GetIndicatorDataUseCase,
    IndicatorView,
)

__all__ = [
    "UseCase",
    "IndicatorView",
    "GetIndicatorDataRequest",
    "GetIndicatorDataResponse",
    "GetIndicatorDataUseCase",
    "GetDashboardRequest",
    "GetDashboardResponse",
    "GetDashboardUseCase",
    "GetFavoritesRequest",
    "GetFavoritesResponse",
    "GetFavoritesUseCase",
    "CompareIndicatorsRequest",
    "CompareIndicatorsResponse",
    "CompareIndicatorsUseCase",
    "ExportIndicatorCsvRequest",
    "ExportIndicatorCsvResponse",
    "ExportIndicatorCsvUseCase",
    "EvaluateAlertsRequest",
    "EvaluateAlertsResponse",
    "EvaluateAlertsUseCase",
]
