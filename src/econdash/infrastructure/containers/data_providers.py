"""Data provider container configuration."""

from dependency_injector import providers

from econdash.infrastructure.config import Settings
from econdash.infrastructure.data_providers import FredSeriesProvider, MockSeriesGenerator


def effective_fred_api_key(override: str | None, settings: Settings) -> str | None:
    """Use the integrator's key when given, otherwise ``ECONDASH_FRED_API_KEY``."""
    return override if override is not None else settings.fred_api_key


def configure_data_providers(
    settings: providers.Provider,
    fred_api_key: providers.Provider,
) -> dict[str, providers.Provider]:
    """Configure data provider providers.

    Args:
        settings: Provider of application settings
        fred_api_key: Provider of the FRED API key to use

    Returns:
        Dictionary of data provider providers
    """
    return {
        "series_provider": providers.Singleton(
            FredSeriesProvider,
            api_key=fred_api_key,
            base_url=settings.provided.fred_base_url,
            rate_limit_delay=settings.provided.fred_rate_limit_delay,
            timeout_seconds=settings.provided.fred_timeout_seconds,
        ),
        "mock_generator": providers.Singleton(MockSeriesGenerator),
    }
