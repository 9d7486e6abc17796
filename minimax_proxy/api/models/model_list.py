"""
Response models for the model listing endpoint.
"""
from typing import List

from pydantic import BaseModel


class ModelCard(BaseModel):
    """A single entry of the OpenAI-compatible model list."""

    id: str
    object: str = "model"
    created: int
    owned_by: str


class ModelList(BaseModel):
    """OpenAI-compatible `/v1/models` response."""

    object: str = "list"
    data: List[ModelCard]
