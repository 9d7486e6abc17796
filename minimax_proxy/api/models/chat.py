"""
Request and response models for the chat completions relay.
"""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

# Model used when the caller does not name one
DEFAULT_MODEL = "minimax-m2"


def _is_unset(value: Any) -> bool:
    """True for null, false, 0 and "". Arrays and objects count as set."""
    if isinstance(value, (list, dict)):
        return False
    return not value


class ChatCompletionRequest(BaseModel):
    """OpenAI-style chat completion payload.

    Only `model` is inspected. Every other field (messages, temperature,
    tools, ...) is kept as-is and forwarded untouched.
    """
    model_config = ConfigDict(extra="allow")

    model: Any = None

    def to_upstream_body(self) -> Dict[str, Any]:
        """Serializable body for the upstream call, with the default model applied."""
        body = self.model_dump()
        if _is_unset(body.get("model")):
            body["model"] = DEFAULT_MODEL
        return body


class ProxyErrorResponse(BaseModel):
    """Error envelope returned when the upstream cannot be reached."""

    error: str
