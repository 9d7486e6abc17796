"""
Error handling middleware.
Turns exceptions that escape the route layer into a JSON 500.
"""
import logging
import traceback
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from minimax_proxy.api.models import ErrorResponse
from minimax_proxy.config.settings import get_settings

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging.

    Body validation errors and HTTPExceptions are answered by FastAPI's own
    handlers before they reach this point.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except Exception as e:
            tb_str = traceback.format_exc()
            is_production = get_settings().is_production

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )

            # Don't expose internal errors in production
            if is_production:
                message = "An internal error occurred. Please try again later."
            else:
                message = f"{type(e).__name__}: {str(e)}"

            response_content = ErrorResponse(
                error="Internal Server Error",
                message=message,
            ).model_dump()

            if not is_production:
                response_content["traceback"] = tb_str

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=response_content,
            )
