"""Static catalog of prompt templates guiding analysis of Oura data."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Placeholder token -> argument name
PLACEHOLDERS: dict[str, str] = {
    "[TIME_PERIOD]": "time_period",
    "[METRIC_TYPE]": "metric_type",
}

PLACEHOLDER_DESCRIPTIONS: dict[str, str] = {
    "time_period": "Period to analyze, e.g. 'last week' or '2024-03-01 to 2024-03-07'",
    "metric_type": "Metric to analyze, e.g. 'sleep', 'readiness' or 'activity'",
}

_PLACEHOLDER_RE = re.compile(r"\[(TIME_PERIOD|METRIC_TYPE)\]")


@dataclass(frozen=True)
class PromptTemplate:
    id: str
    name: str
    description: str
    text: str

    def arguments(self) -> list[str]:
        """Names of the placeholders used by this template, in first-use order."""
        seen: list[str] = []
        for token in _PLACEHOLDER_RE.findall(self.text):
            name = PLACEHOLDERS[f"[{token}]"]
            if name not in seen:
                seen.append(name)
        return seen

    def render(self, arguments: dict[str, str] | None = None) -> str:
        """Substitute supplied placeholder values; missing ones stay as-is."""
        arguments = arguments or {}
        text = self.text
        for token, name in PLACEHOLDERS.items():
            value = arguments.get(name)
            if value:
                text = text.replace(token, value)
        return text

    def summary(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "description": self.description}


PROMPTS: tuple[PromptTemplate, ...] = (
    PromptTemplate(
        id="get-readiness",
        name="Get readiness data",
        description="Retrieve readiness scores from your Oura ring",
        text=(
            "Show me my readiness scores for the [TIME_PERIOD]. To do this, you'll need to:\n"
            "1. Use the oura-fetch tool to get daily readiness data\n"
            "2. Analyze the data to show average scores and trends\n"
            "3. Consider fetching tags data for the same period to look for correlations "
            "with activities, meals, or other factors that might affect readiness"
        ),
    ),
    PromptTemplate(
        id="get-sleep",
        name="Get sleep data",
        description="Retrieve sleep metrics from your Oura ring",
        text=(
            "Show me my sleep data for the [TIME_PERIOD]. To do this, you'll need to:\n"
            "1. Use the oura-fetch tool to get daily sleep data\n"
            "2. Analyze the data to show sleep duration, efficiency, and other metrics\n"
            "3. IMPORTANT: When calculating sleep stage percentages (deep, REM, light), "
            "always use the total_sleep_duration as the denominator, NOT time_in_bed. "
            "This ensures calculations match what the Oura app shows.\n"
            "4. If visualizing sleep stages, show percentages of actual sleep time, not time in bed.\n"
            "5. Consider fetching tags data for the same period to look for correlations "
            "with activities, meals, or other factors that might affect sleep"
        ),
    ),
    PromptTemplate(
        id="get-activity",
        name="Get activity data",
        description="Retrieve activity metrics from your Oura ring",
        text=(
            "Show me my activity data for the [TIME_PERIOD]. To do this, you'll need to:\n"
            "1. Use the oura-fetch tool to get daily activity data\n"
            "2. Analyze the data to show steps, calories, and activity levels\n"
            "3. Consider fetching tags data for the same period to look for correlations "
            "with meals, recovery practices, or other factors that might affect activity"
        ),
    ),
    PromptTemplate(
        id="get-heart-rate",
        name="Get heart rate data",
        description="Retrieve heart rate data from your Oura ring",
        text=(
            "Show me my heart rate data for the [TIME_PERIOD]. To do this, you'll need to:\n"
            "1. Use the oura-fetch tool to get heart rate data\n"
            "2. Calculate average, minimum, and maximum heart rates over the specified period\n"
            "3. Be precise with time-based calculations and always verify the units of "
            "measurement (seconds vs. minutes vs. hours)\n"
            "4. Consider fetching tags data for the same period to look for correlations "
            "with activities, meals, or other factors that might affect heart rate"
        ),
    ),
    PromptTemplate(
        id="get-heart-rate-during-sleep",
        name="Get heart rate during sleep",
        description="Retrieve heart rate data during sleep periods",
        text=(
            "Show me my heart rate data during sleep for the [TIME_PERIOD]. "
            "To do this, you'll need to:\n"
            "1. Use the oura-fetch tool to get sleep data to identify sleep periods\n"
            "2. Use the oura-fetch tool to get heart rate data during those periods\n"
            "3. Analyze the data to show trends in heart rate during sleep\n"
            "4. Consider fetching tags data for the same period to look for correlations "
            "with evening activities, meals, or other factors that might affect "
            "night-time heart rate"
        ),
    ),
    PromptTemplate(
        id="get-stress",
        name="Get stress data",
        description="Retrieve stress metrics from your Oura ring",
        text=(
            "Show me my stress data for the [TIME_PERIOD]. To do this, you'll need to:\n"
            "1. Use the oura-fetch tool with the stress endpoint\n"
            "2. Analyze the data to show stress levels and recovery periods\n"
            "3. Consider fetching tags data for the same period to look for correlations "
            "with activities, meals, or other factors that might affect stress levels"
        ),
    ),
    PromptTemplate(
        id="get-tags",
        name="Get Oura tags",
        description="Retrieve tags from your Oura ring",
        text=(
            "Show me my tags for the [TIME_PERIOD]. To do this, you'll need to:\n"
            "1. Use the oura-fetch tool with the tags endpoint\n"
            "2. Analyze the data to show tags I've created\n"
            "3. Consider fetching health metrics (sleep, readiness, activity, stress) "
            "for the same period to identify patterns and correlations"
        ),
    ),
    PromptTemplate(
        id="analyze-health-factors",
        name="Analyze health factors",
        description="Analyze how different factors affect your health metrics",
        text=(
            "Analyze how different factors affect my [METRIC_TYPE] for the [TIME_PERIOD]. "
            "To do this, you'll need to:\n"
            "1. Use the oura-fetch tool to get [METRIC_TYPE] data\n"
            "2. Use the oura-fetch tool to get tags data for the same period\n"
            "3. When processing duration data, always verify the units (the API provides "
            "durations in seconds) and convert appropriately to hours/minutes for visualization\n"
            "4. For sleep data, always calculate stage percentages based on "
            "total_sleep_duration, not time_in_bed\n"
            "5. Analyze the data to identify patterns and correlations\n"
            "6. Create a visualization showing how different factors (such as meals, "
            "activities, etc.) in my tags relate to my [METRIC_TYPE]"
        ),
    ),
    PromptTemplate(
        id="analyze-meal-effects",
        name="Analyze meal effects on health",
        description="Analyze how different meals affect your health metrics",
        text=(
            "Analyze how my meals affect my [METRIC_TYPE] for the [TIME_PERIOD]. "
            "To do this, you'll need to:\n"
            "1. Use the oura-fetch tool to get [METRIC_TYPE] data\n"
            "2. Use the oura-fetch tool to get tags data for the same period\n"
            "3. Filter the tags to focus on those containing meal descriptions "
            "(like 'Dinner', 'Breakfast', etc.)\n"
            "4. Analyze the data to identify patterns between meal types and health metrics\n"
            "5. Create a visualization showing how different meals relate to my [METRIC_TYPE]"
        ),
    ),
    PromptTemplate(
        id="verify-calculations",
        name="Verify calculations",
        description="Double-check calculations for accuracy",
        text=(
            "Verify my [METRIC_TYPE] calculations for [TIME_PERIOD]. "
            "To do this, you'll need to:\n"
            "1. Use the oura-fetch tool to get raw data\n"
            "2. Show your calculation methodology step-by-step, including units and "
            "conversion factors\n"
            "3. For sleep data, verify that percentages match what would be shown in the "
            "Oura app (based on total_sleep_duration, not time_in_bed)\n"
            "4. Identify any potential calculation errors or statistical anomalies\n"
            "5. Present both raw values and calculated percentages/averages side by side "
            "for transparency"
        ),
    ),
    PromptTemplate(
        id="get-sleep-details",
        name="Get detailed sleep information",
        description="Retrieve and explain detailed sleep metrics from your Oura ring",
        text=(
            "Show me detailed analysis of my sleep for [TIME_PERIOD]. "
            "To do this, you'll need to:\n"
            "1. Use the oura-fetch tool with the sleep_sessions endpoint for detailed "
            "sleep metrics\n"
            "2. Understand key fields: total_sleep_duration (actual sleep in seconds), "
            "time_in_bed (total time in seconds), awake_time (awake time in seconds)\n"
            "3. Sleep stage data includes: deep_sleep_duration, rem_sleep_duration, "
            "light_sleep_duration (all in seconds)\n"
            "4. Calculate sleep efficiency as (total_sleep_duration / time_in_bed * 100)\n"
            "5. Calculate sleep stage percentages using total_sleep_duration as the "
            "denominator, not time_in_bed\n"
            "6. Present all findings with original units AND human-readable formats "
            "(convert seconds to hours/minutes)"
        ),
    ),
    PromptTemplate(
        id="data-handling-guidelines",
        name="Data handling guidelines",
        description="Guidelines for handling Oura data correctly",
        text=(
            "Important guidelines for analyzing Oura data:\n\n"
            "1. TIME UNITS: All duration fields in the API response are in seconds. "
            "Always convert to hours/minutes for user-friendly display.\n\n"
            "2. SLEEP PERCENTAGES: Always calculate sleep stage percentages (deep, REM, "
            "light) using total_sleep_duration as the denominator, not time_in_bed. "
            "This matches how percentages are displayed in the Oura app.\n\n"
            "3. EFFICIENCY: Sleep efficiency is total_sleep_duration divided by "
            "time_in_bed, multiplied by 100 to get a percentage.\n\n"
            "4. TAGS: Custom tags (with GUID tag_type_code) usually contain meal "
            "information in the comment field.\n\n"
            "5. CORRELATIONS: When analyzing correlations, always ensure data points are "
            "properly time-aligned and use appropriate time offsets when looking for "
            "delayed effects.\n\n"
            "6. VISUALIZATION: Always show both raw values and percentages in "
            "visualizations, and clearly label which denominator was used for "
            "percentage calculations."
        ),
    ),
)

_BY_ID: dict[str, PromptTemplate] = {prompt.id: prompt for prompt in PROMPTS}


def list_prompts() -> tuple[PromptTemplate, ...]:
    return PROMPTS


def get_prompt(prompt_id: str) -> PromptTemplate:
    """Look up a template by id.

    Raises:
        ValueError: If no template has this id.
    """
    prompt = _BY_ID.get(prompt_id)
    if prompt is None:
        raise ValueError(f"Prompt not found: {prompt_id}")
    return prompt
