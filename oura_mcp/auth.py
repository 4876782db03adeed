"""Optional bearer-token guard for the HTTP transport.

Only applies when ``SERVICE_AUTH_TOKEN`` is configured; the stdio transport
never goes through it.
"""

from __future__ import annotations

import hmac

import structlog
from fastapi import HTTPException, Request

from oura_mcp.config import get_settings

logger = structlog.get_logger()


def _bearer_token(request: Request) -> str | None:
    scheme, _, value = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not value:
        return None
    return value.strip()


async def require_service_auth(request: Request) -> None:
    """FastAPI dependency rejecting callers without the configured token (401)."""
    expected = get_settings().service_auth_token
    if not expected:
        logger.debug("service_auth_disabled", path=request.url.path)
        return

    presented = _bearer_token(request)
    if presented is None:
        raise HTTPException(status_code=401, detail="Missing service auth token")

    if not hmac.compare_digest(presented.encode(), expected.encode()):
        logger.warning(
            "service_auth_failed",
            path=request.url.path,
            remote=request.client.host if request.client else "unknown",
        )
        raise HTTPException(status_code=401, detail="Invalid service auth token")
