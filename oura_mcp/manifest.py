"""Oura server manifest — tool definitions."""

from oura_mcp.schemas import ModuleManifest, ToolDefinition, ToolParameter

TOOL_NAME = "oura-fetch"

ENDPOINTS = [
    "activity",
    "readiness",
    "sleep",
    "stress",
    "heartrate",
    "sleep_sessions",
    "tags",
]

FETCH_TOOL = ToolDefinition(
    name=TOOL_NAME,
    description="Fetch data from Oura Ring API endpoints",
    parameters=[
        ToolParameter(
            name="endpoint",
            type="string",
            description="The Oura API endpoint to fetch data from",
            enum=ENDPOINTS,
        ),
        ToolParameter(
            name="startDate",
            type="string",
            description="Start date in YYYY-MM-DD format",
            required=False,
        ),
        ToolParameter(
            name="endDate",
            type="string",
            description="End date in YYYY-MM-DD format",
            required=False,
        ),
        ToolParameter(
            name="startDateTime",
            type="string",
            description="Start datetime in ISO format with timezone (for heartrate endpoint)",
            required=False,
        ),
        ToolParameter(
            name="endDateTime",
            type="string",
            description="End datetime in ISO format with timezone (for heartrate endpoint)",
            required=False,
        ),
        ToolParameter(
            name="sleepPeriod",
            type="boolean",
            description=(
                "Whether to filter heart rate data to sleep periods only "
                "(requires additional sleep data fetch)"
            ),
            required=False,
        ),
        ToolParameter(
            name="tagName",
            type="string",
            description="Optional filter for specific tag name or keyword in comment",
            required=False,
        ),
    ],
)

MANIFEST = ModuleManifest(
    module_name="oura",
    description=(
        "Fetch daily activity, readiness, sleep, stress, heart rate, "
        "detailed sleep sessions and tags from an Oura Ring."
    ),
    tools=[FETCH_TOOL],
)
