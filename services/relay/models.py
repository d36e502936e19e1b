"""Relay Service — request/response models."""

from typing import Any, Optional

from pydantic import BaseModel, StrictStr, field_validator


class ChatRequest(BaseModel):
    message: StrictStr
    # Opaque to this service, forwarded exactly as received
    sessionId: Optional[Any] = None

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        # U+FEFF counts as blank too
        if not value.replace("\ufeff", "").strip():
            raise ValueError("message must not be blank")
        return value


class HealthResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
