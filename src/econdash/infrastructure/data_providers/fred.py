"""FRED (Federal Reserve Economic Data) series provider implementation."""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Any

import httpx
import structlog

from econdash.domain.models.series import RawObservation
from econdash.domain.ports.data_providers import RawSeriesProvider

logger = structlog.get_logger(__name__)


class FredSeriesProvider(RawSeriesProvider):
    """FRED implementation of RawSeriesProvider.

    Observations are passed through as FRED sends them, including the "."
    placeholder for missing values; cleaning belongs to the validator.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api.stlouisfed.org/fred",
        rate_limit_delay: float = 0.1,
        timeout_seconds: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._rate_limit_delay = rate_limit_delay
        self._timeout_seconds = timeout_seconds
        self._client: httpx.AsyncClient | None = None

    def get_provider_name(self) -> str:
        return "fred"

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout_seconds,
                follow_redirects=True,
            )
        return self._client

    async def is_available(self) -> bool:
        if not self._api_key:
            logger.debug("FRED API key not set", has_api_key=False)
            return False
        try:
            client = await self._get_client()
            resp = await client.get(
                "/series",
                params={"series_id": "UNRATE", "api_key": self._api_key, "file_type": "json"},
                timeout=5.0,
            )
        except httpx.HTTPError as e:
            logger.warning(
                "FRED availability check failed with exception",
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        if resp.status_code == 200:
            logger.debug("FRED availability check passed", status_code=resp.status_code)
            return True
        logger.warning(
            "FRED availability check failed",
            status_code=resp.status_code,
            response_text=resp.text[:200] if resp.text else None,
        )
        return False

    async def get_time_series(
        self,
        series_id: str,
        start_date: date,
        end_date: date,
    ) -> list[RawObservation]:
        if not self._api_key:
            raise RuntimeError("FRED API key not configured (set ECONDASH_FRED_API_KEY)")

        client = await self._get_client()
        params: dict[str, Any] = {
            "series_id": series_id,
            "api_key": self._api_key,
            "file_type": "json",
            "observation_start": start_date.isoformat(),
            "observation_end": end_date.isoformat(),
        }

        await asyncio.sleep(self._rate_limit_delay)
        resp = await client.get("/series/observations", params=params)
        resp.raise_for_status()
        payload = resp.json()

        observations = payload.get("observations") or []
        logger.debug(
            "Fetched FRED observations",
            series_id=series_id,
            count=len(observations),
            start=params["observation_start"],
            end=params["observation_end"],
        )
        return [
            RawObservation(date=obs.get("date"), value=obs.get("value"))
            for obs in observations
            if isinstance(obs, dict)
        ]

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
