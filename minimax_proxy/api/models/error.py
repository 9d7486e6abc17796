from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Envelope for unhandled server errors."""

    error: str
    message: str
