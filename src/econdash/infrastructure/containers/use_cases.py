"""Use case container configuration."""

from dependency_injector import providers

from econdash.application.use_cases import (
    CompareIndicatorsUseCase,
    EvaluateAlertsUseCase,
    ExportIndicatorCsvUseCase,
    GetDashboardUseCase,
    GetFavoritesUseCase,
    GetIndicatorDataUseCase,
)


def configure_use_cases(
    catalog: providers.Provider,
    orchestrator: providers.Provider,
    access_policy: providers.Provider,
    settings: providers.Provider,
) -> dict[str, providers.Provider]:
    """Configure use case providers.

    Returns:
        Dictionary of use case factories keyed by container attribute name
    """
    get_dashboard_use_case = providers.Factory(
        GetDashboardUseCase,
        catalog=catalog,
        orchestrator=orchestrator,
    )
    return {
        "get_indicator_data_use_case": providers.Factory(
            GetIndicatorDataUseCase,
            catalog=catalog,
            orchestrator=orchestrator,
            access_policy=access_policy,
            default_moving_average_windows=settings.provided.default_moving_average_windows,
        ),
        "get_dashboard_use_case": get_dashboard_use_case,
        "get_favorites_use_case": providers.Factory(
            GetFavoritesUseCase,
            dashboard=get_dashboard_use_case,
            access_policy=access_policy,
        ),
        "compare_indicators_use_case": providers.Factory(
            CompareIndicatorsUseCase,
            dashboard=get_dashboard_use_case,
            access_policy=access_policy,
        ),
        "export_indicator_csv_use_case": providers.Factory(
            ExportIndicatorCsvUseCase,
            catalog=catalog,
            orchestrator=orchestrator,
            access_policy=access_policy,
        ),
        "evaluate_alerts_use_case": providers.Factory(
            EvaluateAlertsUseCase,
            catalog=catalog,
            orchestrator=orchestrator,
            access_policy=access_policy,
        ),
    }
