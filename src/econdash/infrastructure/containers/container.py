"""Main dependency injection container configuration.

This module composes the container modules into a single Container class.
"""

from dependency_injector import containers, providers

from econdash.application.orchestrator import IndicatorSeriesOrchestrator
from econdash.domain.services.access import FeatureAccessPolicy
from econdash.infrastructure.catalog import IndicatorCatalog
from econdash.infrastructure.config import get_settings
from econdash.infrastructure.containers.data_providers import (
    configure_data_providers,
    effective_fred_api_key,
)
from econdash.infrastructure.containers.use_cases import configure_use_cases


class Container(containers.DeclarativeContainer):
    """Dependency injection container for econdash.

    To provide your own FRED API key (for library integrators):
        container = get_container(fred_api_key="your-fred-api-key")

    Or override after creation:
        container = Container()
        container.fred_api_key_override.override("your-fred-api-key")
    """

    # Configuration
    settings = providers.Singleton(get_settings)
    fred_api_key_override = providers.Object(None)
    fred_api_key = providers.Callable(
        effective_fred_api_key,
        override=fred_api_key_override,
        settings=settings,
    )

    # Data providers (singletons, can be overridden)
    _data_providers_config = configure_data_providers(settings, fred_api_key)
    series_provider = _data_providers_config["series_provider"]
    mock_generator = _data_providers_config["mock_generator"]

    # Static tables, built once
    catalog = providers.Singleton(IndicatorCatalog)
    access_policy = providers.Singleton(FeatureAccessPolicy)

    orchestrator = providers.Singleton(
        IndicatorSeriesOrchestrator,
        provider=series_provider,
        mock_generator=mock_generator,
        default_window_years=settings.provided.default_window_years,
    )

    # Use cases
    _use_cases_config = configure_use_cases(catalog, orchestrator, access_policy, settings)
    get_indicator_data_use_case = _use_cases_config["get_indicator_data_use_case"]
    get_dashboard_use_case = _use_cases_config["get_dashboard_use_case"]
    get_favorites_use_case = _use_cases_config["get_favorites_use_case"]
    compare_indicators_use_case = _use_cases_config["compare_indicators_use_case"]
    export_indicator_csv_use_case = _use_cases_config["export_indicator_csv_use_case"]
    evaluate_alerts_use_case = _use_cases_config["evaluate_alerts_use_case"]


# Global container instance (can be overridden for testing)
_container: Container | None = None


def get_container(fred_api_key: str | None = None) -> Container:
    """Get the global dependency injection container.

    Args:
        fred_api_key: Optional FRED API key. If None, uses ECONDASH_FRED_API_KEY from
                     settings. Passing a key returns a new container so that several
                     keys can coexist.

    Returns:
        Container instance
    """
    global _container
    if fred_api_key is not None:
        container_instance = Container()
        container_instance.fred_api_key_override.override(fred_api_key)
        if _container is None:
            _container = container_instance
        return container_instance

    if _container is None:
        _container = Container()
    return _container


def set_container(container: Container) -> None:
    """Set a custom container (useful for testing).

    Args:
        container: Container instance to use
    """
    global _container
    _container = container


def reset_container() -> None:
    """Reset the global container (useful for testing)."""
    global _container
    _container = None


async def close_container() -> None:
    """Close the network client held by the global container's series provider."""
    if _container is None:
        return
    close = getattr(_container.series_provider(), "close", None)
    if close is not None:
        await close()
