"""
Chat completion endpoints.

Relays OpenAI-compatible chat completion requests to the MiniMax API.
"""
from fastapi import APIRouter, Depends, Request, Response

from minimax_proxy.api.dependencies.upstream import get_relay_controller
from minimax_proxy.api.models import ChatCompletionRequest, ProxyErrorResponse
from minimax_proxy.controllers.relay_controller import RelayController

# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/chat/completions",
    responses={
        500: {"model": ProxyErrorResponse, "description": "Upstream unreachable"},
    },
)
async def chat_completions(
    payload: ChatCompletionRequest,
    request: Request,
    controller: RelayController = Depends(get_relay_controller),
) -> Response:
    """
    Relay a chat completion to the MiniMax API.

    Sets `model` to the default when the caller leaves it empty. The
    upstream status code and body are returned unchanged, including
    upstream 4xx/5xx errors.
    """
    return await controller.relay_chat_completion(payload, request.state)
