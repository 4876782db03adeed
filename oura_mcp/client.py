"""Oura Ring v2 API client."""

from __future__ import annotations

import httpx
import structlog

from oura_mcp.config import DEFAULT_API_BASE
from oura_mcp.errors import OuraAPIError
from oura_mcp.models import (
    DailyActivity,
    DailyReadiness,
    DailySleep,
    DailyStress,
    HeartRate,
    OuraResponse,
    SleepSession,
    TagResponse,
)

logger = structlog.get_logger()


def _date_range(start_date: str | None, end_date: str | None) -> dict[str, str]:
    """Build day-range query params, omitting values that were not given."""
    params = {"start_date": start_date, "end_date": end_date}
    return {k: v for k, v in params.items() if v}


def _datetime_range(start_datetime: str | None, end_datetime: str | None) -> dict[str, str]:
    params = {"start_datetime": start_datetime, "end_datetime": end_datetime}
    return {k: v for k, v in params.items() if v}


class OuraClient:
    """Async client for the Oura ``/v2/usercollection`` endpoints.

    Each call issues exactly one GET on a fresh connection. There are no
    retries, and ``next_token`` is handed back to the caller, never followed.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_BASE,
        timeout: float | None = None,
    ):
        self._token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def get_daily_activity(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> OuraResponse[DailyActivity]:
        data = await self._fetch("daily_activity", _date_range(start_date, end_date))
        return OuraResponse[DailyActivity].model_validate(data)

    async def get_daily_readiness(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> OuraResponse[DailyReadiness]:
        data = await self._fetch("daily_readiness", _date_range(start_date, end_date))
        return OuraResponse[DailyReadiness].model_validate(data)

    async def get_daily_sleep(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> OuraResponse[DailySleep]:
        data = await self._fetch("daily_sleep", _date_range(start_date, end_date))
        return OuraResponse[DailySleep].model_validate(data)

    async def get_daily_stress(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> OuraResponse[DailyStress]:
        data = await self._fetch("daily_stress", _date_range(start_date, end_date))
        return OuraResponse[DailyStress].model_validate(data)

    async def get_heart_rate(
        self, start_datetime: str | None = None, end_datetime: str | None = None
    ) -> OuraResponse[HeartRate]:
        """Fetch heart rate samples between two ISO-8601 datetimes (with offset)."""
        data = await self._fetch("heartrate", _datetime_range(start_datetime, end_datetime))
        return OuraResponse[HeartRate].model_validate(data)

    async def get_sleep(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> OuraResponse[SleepSession]:
        """Fetch detailed sleep sessions (stage durations, HR/HRV series)."""
        data = await self._fetch("sleep", _date_range(start_date, end_date))
        return OuraResponse[SleepSession].model_validate(data)

    async def get_tags(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> TagResponse:
        """Fetch enhanced tags, unprocessed."""
        data = await self._fetch("enhanced_tag", _date_range(start_date, end_date))
        return TagResponse.model_validate(data)

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}

    async def _fetch(self, path: str, params: dict[str, str]) -> dict:
        """GET one endpoint and return the decoded JSON body."""
        url = f"{self.base_url}/{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params, headers=self._headers())
        except httpx.RequestError as e:
            logger.error("oura_request_error", path=path, error=str(e))
            raise

        if not resp.is_success:
            logger.error("oura_http_error", path=path, status=resp.status_code, body=resp.text)
            raise OuraAPIError(resp.status_code, resp.text)

        return resp.json()
