"""Pydantic models for Oura API payloads and tool request/response shapes."""

from __future__ import annotations

from typing import Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field


class OuraModel(BaseModel):
    """Base for upstream records.

    Unknown fields are kept and numbers keep the type they arrived as, so a
    payload survives a parse/dump cycle with its keys and values intact.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


T = TypeVar("T", bound=OuraModel)


class OuraResponse(OuraModel, Generic[T]):
    """Collection envelope returned by every ``/v2/usercollection`` endpoint."""

    data: list[T] | None = None
    next_token: str | None = None


class SampleSeries(OuraModel):
    interval: int | float | None = None
    items: list[int | float | None] | None = None
    timestamp: str | None = None


# ---------------------------------------------------------------------------
# Daily summaries
# ---------------------------------------------------------------------------


class ActivityContributors(OuraModel):
    meet_daily_targets: int | float | None = None
    move_every_hour: int | float | None = None
    recovery_time: int | float | None = None
    stay_active: int | float | None = None
    training_frequency: int | float | None = None
    training_volume: int | float | None = None


class DailyActivity(OuraModel):
    id: str | None = None
    day: str | None = None
    score: int | float | None = None
    active_calories: int | float | None = None
    total_calories: int | float | None = None
    target_calories: int | float | None = None
    steps: int | float | None = None
    equivalent_walking_distance: int | float | None = None
    meters_to_target: int | float | None = None
    # All *_time fields are seconds
    high_activity_time: int | float | None = None
    medium_activity_time: int | float | None = None
    low_activity_time: int | float | None = None
    sedentary_time: int | float | None = None
    resting_time: int | float | None = None
    non_wear_time: int | float | None = None
    average_met_minutes: int | float | None = None
    inactivity_alerts: int | float | None = None
    class_5_min: str | None = None
    contributors: ActivityContributors | None = None
    met: SampleSeries | None = None
    timestamp: str | None = None


class ReadinessContributors(OuraModel):
    activity_balance: int | float | None = None
    body_temperature: int | float | None = None
    hrv_balance: int | float | None = None
    previous_day_activity: int | float | None = None
    previous_night: int | float | None = None
    recovery_index: int | float | None = None
    resting_heart_rate: int | float | None = None
    sleep_balance: int | float | None = None


class DailyReadiness(OuraModel):
    id: str | None = None
    day: str | None = None
    score: int | float | None = None
    temperature_deviation: int | float | None = None
    temperature_trend_deviation: int | float | None = None
    contributors: ReadinessContributors | None = None
    timestamp: str | None = None


class SleepContributors(OuraModel):
    deep_sleep: int | float | None = None
    efficiency: int | float | None = None
    latency: int | float | None = None
    rem_sleep: int | float | None = None
    restfulness: int | float | None = None
    timing: int | float | None = None
    total_sleep: int | float | None = None


class DailySleep(OuraModel):
    id: str | None = None
    day: str | None = None
    score: int | float | None = None
    contributors: SleepContributors | None = None
    timestamp: str | None = None


class DailyStress(OuraModel):
    id: str | None = None
    day: str | None = None
    stress_high: int | float | None = None
    recovery_high: int | float | None = None
    day_summary: str | None = None


# ---------------------------------------------------------------------------
# Point samples and sessions
# ---------------------------------------------------------------------------


class HeartRate(OuraModel):
    bpm: int | float | None = None
    source: str | None = None
    timestamp: str | None = None


class SessionReadiness(OuraModel):
    contributors: ReadinessContributors | None = None
    score: int | float | None = None
    temperature_deviation: int | float | None = None
    temperature_trend_deviation: int | float | None = None


class SleepSession(OuraModel):
    """One detailed sleep episode. Durations are seconds.

    ``total_sleep_duration <= time_in_bed`` is expected but not enforced.
    """

    id: str | None = None
    day: str | None = None
    bedtime_start: str | None = None
    bedtime_end: str | None = None
    type: str | None = None
    period: int | float | None = None
    deep_sleep_duration: int | float | None = None
    rem_sleep_duration: int | float | None = None
    light_sleep_duration: int | float | None = None
    awake_time: int | float | None = None
    total_sleep_duration: int | float | None = None
    time_in_bed: int | float | None = None
    efficiency: int | float | None = None
    latency: int | float | None = None
    average_breath: int | float | None = None
    average_heart_rate: int | float | None = None
    average_hrv: int | float | None = None
    lowest_heart_rate: int | float | None = None
    restless_periods: int | float | None = None
    heart_rate: SampleSeries | None = None
    hrv: SampleSeries | None = None
    readiness: SessionReadiness | None = None
    readiness_score_delta: int | float | None = None
    sleep_score_delta: int | float | None = None
    sleep_phase_5_min: str | None = None
    movement_30_sec: str | None = None
    sleep_algorithm_version: str | None = None
    low_battery_alert: bool | None = None


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


class Tag(OuraModel):
    """An ``enhanced_tag`` record.

    ``tag_type_code`` is either a descriptive code (standard tag) or a UUID
    (user-defined custom tag).
    """

    id: str | None = None
    tag_type_code: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    start_day: str | None = None
    end_day: str | None = None
    comment: str | None = None
    custom_name: str | None = None


class TagMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    standard_tags: int = Field(alias="standardTags")
    custom_tags: int = Field(alias="customTags")
    note: str


class TagResponse(OuraResponse[Tag]):
    tag_metadata: TagMetadata | None = Field(default=None, alias="tagMetadata")


class HeartRateDuringSleep(OuraModel):
    """Heart rate samples paired with the sleep sessions of the same range."""

    heart_rate: OuraResponse[HeartRate] = Field(alias="heartRate")
    sleep_data: OuraResponse[SleepSession] = Field(alias="sleepData")
    note: str


# One variant per endpoint
FetchResult = Union[
    OuraResponse[DailyActivity],
    OuraResponse[DailyReadiness],
    OuraResponse[DailySleep],
    OuraResponse[DailyStress],
    OuraResponse[HeartRate],
    OuraResponse[SleepSession],
    HeartRateDuringSleep,
    TagResponse,
]


# ---------------------------------------------------------------------------
# Tool arguments
# ---------------------------------------------------------------------------


class FetchRequest(BaseModel):
    """Arguments of the ``oura-fetch`` tool (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    endpoint: str
    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    start_datetime: str | None = Field(default=None, alias="startDateTime")
    end_datetime: str | None = Field(default=None, alias="endDateTime")
    sleep_period: bool | None = Field(default=None, alias="sleepPeriod")
    tag_name: str | None = Field(default=None, alias="tagName")
