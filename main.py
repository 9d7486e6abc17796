"""
MiniMax Proxy
OpenAI-compatible relay in front of the MiniMax chat completions API.
"""
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException, status
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from minimax_proxy import __version__
from minimax_proxy.api.routers import api_router, health_router
from minimax_proxy.config.settings import get_settings
from minimax_proxy.middleware.cors import CORSHeadersMiddleware
from minimax_proxy.middleware.error_handling import ErrorHandlingMiddleware
from minimax_proxy.middleware.request_logging import RequestLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    settings = get_settings()
    logging.info(f"Starting {settings.app_name} ({settings.environment})")

    if not settings.openai_api_key:
        logging.error("Upstream credential missing! Check OPENAI_API_KEY")
        raise RuntimeError("OPENAI_API_KEY is not set")

    app.state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.upstream_timeout)
    )
    try:
        yield
    finally:
        logging.info("Shutting down...")
        await app.state.http_client.aclose()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="OpenAI-compatible relay for the MiniMax chat completions API",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    # Last added runs first: CORS wraps everything, including error responses
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CORSHeadersMiddleware)

    app.include_router(api_router, prefix="/v1")
    app.include_router(health_router)

    frontend_dir = settings.frontend_path
    index_file = frontend_dir / settings.frontend_index

    @app.get("/", include_in_schema=False)
    async def frontend_index():
        """Serve the frontend page."""
        if not index_file.is_file():
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Frontend not found",
            )
        return FileResponse(index_file, media_type="text/html")

    # Mounted last so the API routes above take precedence
    if frontend_dir.is_dir():
        app.mount("/", StaticFiles(directory=frontend_dir), name="frontend")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
