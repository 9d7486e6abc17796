"""
Request logging middleware.
Writes one JSON line per request, including the outcome of the upstream
call for relayed chat completions.
"""
import json
import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_PATHS = ("/health", "/docs", "/openapi.json", "/redoc", "/favicon.ico")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log for the proxy.

    The relay records `upstream_status` (a response was relayed) or
    `upstream_error` (no response was obtained) on `request.state`; both
    end up in the log line. Request bodies are never read.
    """

    def __init__(self, app, ignore_paths: tuple = DEFAULT_IGNORE_PATHS):
        super().__init__(app)
        self.ignore_paths = ignore_paths

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.ignore_paths:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        entry = {
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(elapsed * 1000, 2),
            "client": self._client_address(request),
            "user_agent": request.headers.get("user-agent"),
        }
        upstream_status = getattr(request.state, "upstream_status", None)
        upstream_error = getattr(request.state, "upstream_error", None)
        if upstream_status is not None:
            entry["upstream_status"] = upstream_status
        if upstream_error is not None:
            entry["upstream_error"] = upstream_error

        level = self._level(response.status_code, upstream_status, upstream_error)
        logger.log(level, json.dumps(entry))

        response.headers["X-Process-Time"] = str(elapsed)
        return response

    @staticmethod
    def _level(status_code: int, upstream_status, upstream_error) -> int:
        # Relayed upstream 4xx are the caller's problem; upstream 5xx a warning
        if upstream_error is not None:
            return logging.ERROR
        if upstream_status is not None:
            return logging.WARNING if upstream_status >= 500 else logging.INFO
        if status_code >= 500:
            return logging.ERROR
        if status_code >= 400:
            return logging.WARNING
        return logging.INFO

    @staticmethod
    def _client_address(request: Request) -> str:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"
