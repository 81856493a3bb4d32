"""Request timeout middleware.

Bounds the whole request (store load plus search) with asyncio.wait_for and
answers 504 with the standard failure body when the limit is hit.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming.
"""

import asyncio
import json
import logging
from typing import Callable

logger = logging.getLogger(__name__)


def _timeout_body(timeout_seconds: float) -> bytes:
    return json.dumps(
        {
            "success": False,
            "error": f"Request timed out after {timeout_seconds} seconds",
            "errorCode": "GATEWAY_TIMEOUT",
            "details": {"timeout_seconds": timeout_seconds},
        }
    ).encode()


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Cancel the request after timeout_seconds and send 504. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, send_wrapper),
                timeout=float(timeout_seconds),
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if response_started:
                return
            await send({
                "type": "http.response.start",
                "status": 504,
                "headers": [
                    (b"content-type", b"application/json"),
                ],
            })
            await send({
                "type": "http.response.body",
                "body": _timeout_body(timeout_seconds),
                "more_body": False,
            })

    return asgi_app
