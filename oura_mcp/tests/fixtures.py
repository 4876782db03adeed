"""Sample Oura API payloads for tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

CUSTOM_CODE = "a1b2c3d4-e5f6-7890-abcd-ef1234567890"
CUSTOM_CODE_UPPER = "A1B2C3D4-E5F6-7890-ABCD-EF1234567890"

DAILY_ACTIVITY_RESPONSE = {
    "data": [
        {
            "id": "act-1",
            "day": "2024-03-01",
            "score": 82,
            "active_calories": 412,
            "total_calories": 2380,
            "target_calories": 450,
            "steps": 9876,
            "equivalent_walking_distance": 8100,
            "meters_to_target": 200,
            "high_activity_time": 600,
            "medium_activity_time": 2400,
            "low_activity_time": 12000,
            "non_wear_time": 0,
            "contributors": {"meet_daily_targets": 60, "stay_active": 78},
            "timestamp": "2024-03-01T04:00:00+01:00",
        }
    ],
    "next_token": None,
}

DAILY_READINESS_RESPONSE = {
    "data": [
        {
            "id": "rd-1",
            "day": "2024-03-01",
            "score": 77,
            "temperature_deviation": -0.12,
            "temperature_trend_deviation": 0.05,
            "contributors": {"hrv_balance": 70, "resting_heart_rate": 88},
        }
    ],
    "next_token": "bmV4dC1wYWdl",
}

DAILY_SLEEP_RESPONSE = {
    "data": [
        {
            "id": "ds-1",
            "day": "2024-03-01",
            "score": 85,
            "contributors": {"deep_sleep": 90, "efficiency": 88, "total_sleep": 80},
        }
    ]
}

DAILY_STRESS_RESPONSE = {
    "data": [
        {
            "id": "st-1",
            "day": "2024-03-01",
            "stress_high": 3600,
            "recovery_high": 5400,
            "day_summary": "normal",
        }
    ]
}

HEART_RATE_RESPONSE = {
    "data": [
        {"bpm": 54, "source": "awake", "timestamp": "2024-03-01T22:00:00+00:00"},
        {"bpm": 48, "source": "rest", "timestamp": "2024-03-01T23:30:00+00:00"},
        {"bpm": 51, "source": "rest", "timestamp": "2024-03-02T02:00:00+00:00"},
    ],
    "next_token": None,
}

SLEEP_SESSIONS_RESPONSE = {
    "data": [
        {
            "id": "sl-1",
            "day": "2024-03-02",
            "type": "long_sleep",
            "bedtime_start": "2024-03-01T23:05:00+00:00",
            "bedtime_end": "2024-03-02T07:01:00+00:00",
            "deep_sleep_duration": 5400,
            "rem_sleep_duration": 6300,
            "light_sleep_duration": 14400,
            "awake_time": 2460,
            "total_sleep_duration": 26100,
            "time_in_bed": 28560,
            "efficiency": 91,
            "latency": 600,
            "average_heart_rate": 52.5,
            "lowest_heart_rate": 47,
            "heart_rate": {
                "interval": 300,
                "items": [55, None, 50, 48],
                "timestamp": "2024-03-01T23:05:00+00:00",
            },
            "sleep_phase_5_min": "4422211",
        }
    ],
    "next_token": None,
}

TAGS_RESPONSE = {
    "data": [
        {
            "id": "tag-1",
            "tag_type_code": "tag_generic_supplements",
            "start_time": "2024-03-01T08:00:00+00:00",
            "end_time": None,
            "start_day": "2024-03-01",
            "end_day": None,
            "comment": None,
            "custom_name": None,
        },
        {
            "id": "tag-2",
            "tag_type_code": CUSTOM_CODE,
            "start_time": "2024-03-01T19:30:00+00:00",
            "end_time": None,
            "start_day": "2024-03-01",
            "end_day": None,
            "comment": "Dinner: pasta and red wine",
            "custom_name": "Meal",
        },
        {
            "id": "tag-3",
            "tag_type_code": CUSTOM_CODE,
            "start_time": "2024-03-02T12:00:00+00:00",
            "end_time": None,
            "start_day": "2024-03-02",
            "end_day": None,
            "comment": "   ",
            "custom_name": "Meal",
        },
        {
            "id": "tag-4",
            "tag_type_code": CUSTOM_CODE_UPPER,
            "start_time": "2024-03-02T08:00:00+00:00",
            "end_time": None,
            "start_day": "2024-03-02",
            "end_day": None,
            "comment": "",
            "custom_name": "Breakfast",
        },
        {
            "id": "tag-5",
            "tag_type_code": "tag_generic_late_meal",
            "start_time": "2024-03-02T21:45:00+00:00",
            "end_time": None,
            "start_day": "2024-03-02",
            "end_day": None,
            "comment": "",
            "custom_name": None,
        },
        {
            "id": "tag-6",
            "tag_type_code": CUSTOM_CODE_UPPER,
            "start_time": "2024-03-03T07:30:00+00:00",
            "end_time": None,
            "start_day": "2024-03-03",
            "end_day": None,
            "comment": "Oatmeal with berries",
            "custom_name": "Breakfast",
        },
    ],
    "next_token": None,
}

MALFORMED_TAGS_RESPONSE = {"detail": "Unexpected payload"}


# ---------------------------------------------------------------------------
# HTTP mocks
# ---------------------------------------------------------------------------


def mock_http_client(response=None, side_effect=None):
    """Build a stand-in for ``httpx.AsyncClient`` whose ``get`` returns ``response``."""
    mock_client = AsyncMock()
    if side_effect is not None:
        mock_client.get.side_effect = side_effect
    else:
        mock_client.get.return_value = response
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


def json_response(payload, status_code: int = 200, text: str | None = None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.is_success = 200 <= status_code < 300
    resp.json.return_value = payload
    resp.text = text if text is not None else str(payload)
    return resp
