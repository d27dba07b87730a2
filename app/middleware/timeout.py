"""Request timeout middleware.

Cancels a request that runs longer than the configured timeout and answers
504 GATEWAY_TIMEOUT, unless the response has already started. History
appends run under asyncio.shield, so a timeout does not abandon a commit
in flight. Raw ASGI, no BaseHTTPMiddleware.
"""

import asyncio
import logging
from typing import Callable

from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Cancel request after timeout_seconds (504 on timeout). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = False

        async def send_tracking(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(app(scope, receive, send_tracking), timeout=timeout_seconds)
        except TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if response_started:
                return
            response = JSONResponse(
                status_code=504,
                content={
                    "error": "GATEWAY_TIMEOUT",
                    "message": f"Request timed out after {timeout_seconds} seconds",
                    "details": {"timeout_seconds": timeout_seconds},
                },
            )
            await response(scope, receive, send)

    return asgi_app
