"""
Model listing endpoint for OpenAI client compatibility.
"""
from fastapi import APIRouter

from minimax_proxy.api.models import DEFAULT_MODEL, ModelCard, ModelList

router = APIRouter()

AVAILABLE_MODELS = ModelList(
    data=[
        ModelCard(id=DEFAULT_MODEL, created=1765630262, owned_by="minimax"),
    ]
)


@router.get("/models", response_model=ModelList)
async def list_models() -> ModelList:
    """Static model list; clients such as n8n query it before chatting."""
    return AVAILABLE_MODELS
