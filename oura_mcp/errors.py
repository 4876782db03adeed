"""Error types raised by the Oura client and server."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Required configuration is missing; fatal at startup."""


class OuraAPIError(RuntimeError):
    """The Oura API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}: {body}")
