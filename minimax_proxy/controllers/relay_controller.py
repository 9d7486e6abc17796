"""
Relay controller for chat completions.

Forwards OpenAI-style chat completion requests to the MiniMax API and
passes the upstream status and body back to the caller unchanged.
"""
import json
import logging
from typing import Any, Dict

import httpx
from fastapi import HTTPException, Response, status
from fastapi.responses import JSONResponse
from starlette.datastructures import State

from minimax_proxy.api.models.chat import ChatCompletionRequest

logger = logging.getLogger(__name__)

MINIMAX_CHAT_COMPLETIONS_URL = "https://api.minimax.io/v1/chat/completions"

PROXY_ERROR_BODY = {"error": "Proxy server error"}


class RelayController:
    """Controller for relaying chat completions upstream."""

    def __init__(self, client: httpx.AsyncClient, api_key: str):
        """
        Initialize the relay controller.

        Args:
            client: Shared HTTP client used for the upstream call
            api_key: Bearer credential injected into every upstream request
        """
        self.client = client
        self.api_key = api_key

    def _upstream_headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    def _encode_body(self, body: Dict[str, Any]) -> bytes:
        """
        Serialize the upstream body as strict JSON.

        The inbound parser accepts NaN and Infinity, which are not JSON and
        cannot be forwarded.

        Raises:
            HTTPException 422: If the payload holds non-finite numbers
        """
        try:
            encoded = json.dumps(
                body, ensure_ascii=False, separators=(",", ":"), allow_nan=False
            )
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Request body contains NaN or Infinity, which are not valid JSON",
            )
        return encoded.encode("utf-8")

    async def relay_chat_completion(
        self, request: ChatCompletionRequest, state: State
    ) -> Response:
        """
        Forward a chat completion request and relay the upstream response.

        The upstream body is never parsed: whatever bytes come back (success
        payloads, error objects, malformed data) are returned with the
        upstream's status code.

        Args:
            request: Parsed chat completion payload
            state: Per-request state; receives `upstream_status` or
                `upstream_error` for the request logger

        Returns:
            Response mirroring the upstream status and body, or a 500 with
            a fixed error envelope when no upstream response was obtained

        Raises:
            HTTPException 422: If the payload cannot be encoded as JSON
        """
        body = request.to_upstream_body()
        content = self._encode_body(body)

        try:
            upstream = await self.client.post(
                MINIMAX_CHAT_COMPLETIONS_URL,
                headers=self._upstream_headers(),
                content=content,
            )
        except httpx.HTTPError as e:
            logger.error(f"Proxy error: {type(e).__name__}: {e}")
            state.upstream_error = type(e).__name__
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=PROXY_ERROR_BODY,
            )

        state.upstream_status = upstream.status_code
        logger.debug(
            f"Upstream responded {upstream.status_code} for model {body['model']}"
        )
        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            media_type="application/json",
        )
