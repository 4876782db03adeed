"""Oura tool implementations — maps one invocation to client calls."""

from __future__ import annotations

import structlog

from oura_mcp.client import OuraClient
from oura_mcp.manifest import TOOL_NAME
from oura_mcp.models import FetchRequest, FetchResult, HeartRateDuringSleep
from oura_mcp.schemas import ToolResult
from oura_mcp.tags import process_tags

logger = structlog.get_logger()

SLEEP_PERIOD_NOTE = (
    "Heart rate data and sleep data are both provided so you can analyze "
    "heart rate during sleep periods."
)


class OuraTools:
    """Tool implementations for Oura data retrieval."""

    def __init__(self, client: OuraClient):
        self.client = client

    async def call_tool(self, name: str, arguments: dict | None = None) -> ToolResult:
        """Run one tool invocation, converting any failure into an error result."""
        try:
            if name != TOOL_NAME:
                raise ValueError(f"Unsupported tool: {name}")
            request = FetchRequest.model_validate(arguments or {})
            result = await self.fetch(request)
            payload = result.model_dump(mode="json", by_alias=True, exclude_unset=True)
            return ToolResult.success(payload)
        except Exception as e:
            logger.error("tool_execution_error", tool=name, error=str(e), exc_info=True)
            return ToolResult.failure(str(e))

    async def fetch(self, request: FetchRequest) -> FetchResult:
        """Dispatch on ``request.endpoint``."""
        endpoint = request.endpoint

        if endpoint == "activity":
            return await self.client.get_daily_activity(request.start_date, request.end_date)
        if endpoint == "readiness":
            return await self.client.get_daily_readiness(request.start_date, request.end_date)
        if endpoint == "sleep":
            return await self.client.get_daily_sleep(request.start_date, request.end_date)
        if endpoint == "stress":
            return await self.client.get_daily_stress(request.start_date, request.end_date)
        if endpoint == "heartrate":
            return await self.heart_rate(request)
        if endpoint == "sleep_sessions":
            return await self.client.get_sleep(request.start_date, request.end_date)
        if endpoint == "tags":
            tags = await self.client.get_tags(request.start_date, request.end_date)
            return process_tags(tags, request.tag_name)

        raise ValueError(f"Unsupported endpoint: {endpoint}")

    async def heart_rate(self, request: FetchRequest) -> FetchResult:
        """Heart rate samples, paired with sleep sessions when ``sleepPeriod`` is set.

        The pairing needs the day range as well; the two fetches run one after
        the other and are not intersected by timestamp.
        """
        heart_rate = await self.client.get_heart_rate(
            request.start_datetime, request.end_datetime
        )
        if not (request.sleep_period and request.start_date and request.end_date):
            return heart_rate

        sleep_data = await self.client.get_sleep(request.start_date, request.end_date)
        return HeartRateDuringSleep(
            heart_rate=heart_rate,
            sleep_data=sleep_data,
            note=SLEEP_PERIOD_NOTE,
        )
