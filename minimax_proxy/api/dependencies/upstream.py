"""
Upstream dependencies for FastAPI endpoints.
"""
import httpx
from fastapi import Depends, Request

from minimax_proxy.config.settings import Settings, get_settings
from minimax_proxy.controllers.relay_controller import RelayController


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared HTTP client created in the application lifespan."""
    return request.app.state.http_client


def get_relay_controller(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> RelayController:
    """Dependency injection for RelayController."""
    return RelayController(client=client, api_key=settings.openai_api_key)
