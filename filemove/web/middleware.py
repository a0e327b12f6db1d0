"""
Request Logging Middleware
==========================

Logs method, path, status code and duration of every request.

Author: FileMove Project
License: MIT
"""

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from ..utils.logger import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log for the API."""

    # Paths that are only logged at DEBUG level
    QUIET_PATHS = [
        "/health",
        "/api/docs",
        "/api/redoc",
        "/api/openapi.json"
    ]

    async def dispatch(self, request: Request, call_next):
        """Time the request and log the outcome."""
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(
                f"{request.method} {request.url.path} failed after {elapsed_ms:.1f} ms"
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        message = (
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f} ms, client {self._get_client_ip(request)})"
        )
        if any(request.url.path.startswith(path) for path in self.QUIET_PATHS):
            logger.debug(message)
        else:
            logger.info(message)
        return response

    def _get_client_ip(self, request: Request) -> str:
        """
        Get client IP address from request.

        Checks X-Forwarded-For header first (for proxies),
        falls back to direct client IP.
        """
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"
