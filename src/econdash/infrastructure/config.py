"""Application settings loaded from the environment."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """econdash settings; every field can be set as ``ECONDASH_<FIELD>``."""

    model_config = SettingsConfigDict(env_prefix="ECONDASH_", env_file=".env", extra="ignore")

    # Logging
    log_level: str = Field(default="INFO")
    debug: bool = Field(default=False)

    # FRED
    fred_api_key: str | None = Field(default=None)
    fred_base_url: str = Field(default="https://api.stlouisfed.org/fred")
    fred_rate_limit_delay: float = Field(default=0.1, ge=0)
    fred_timeout_seconds: float = Field(default=30.0, gt=0)

    # Series defaults
    default_window_years: int = Field(default=1, ge=1)
    default_moving_average_windows: list[int] = Field(default_factory=lambda: [3, 6, 12])


@lru_cache
def get_settings() -> Settings:
    return Settings()
