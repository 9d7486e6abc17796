"""
CORS middleware.
Adds permissive CORS headers to every response and answers preflights.
"""
from typing import Callable

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
    "Access-Control-Max-Age": "86400",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware applying a fixed CORS policy.

    Unlike Starlette's CORSMiddleware, headers are sent regardless of the
    request's Origin, and any OPTIONS request is answered with 204 before
    routing.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=status.HTTP_204_NO_CONTENT)
        else:
            response = await call_next(request)

        response.headers.update(CORS_HEADERS)
        return response
