from fastapi import APIRouter

from .endpoints import chat
from .endpoints import health
from .endpoints import models

api_router = APIRouter()

# OpenAI-compatible routes, mounted under /v1
api_router.include_router(chat.router, prefix="", tags=["chat"])
api_router.include_router(models.router, prefix="", tags=["models"])

# Operational routes, mounted at the root
health_router = health.router
