from .chat import ChatCompletionRequest, ProxyErrorResponse, DEFAULT_MODEL
from .error import ErrorResponse
from .model_list import ModelCard, ModelList

__all__ = [
    "ErrorResponse",
    "ChatCompletionRequest",
    "ProxyErrorResponse",
    "DEFAULT_MODEL",
    "ModelCard",
    "ModelList",
]
