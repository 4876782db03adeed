"""Shared fixtures for the oura_mcp test suite."""

from __future__ import annotations

import pytest
import structlog

from oura_mcp.client import OuraClient
from oura_mcp.config import get_settings
from oura_mcp.tools import OuraTools


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; clear them around each test so env patches apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def client():
    return OuraClient("test-token", base_url="https://api.example.test/v2/usercollection")


@pytest.fixture
def tools(client):
    return OuraTools(client)
