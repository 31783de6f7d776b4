"""
DTOs for WebSocket frames.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class InboundEvent(BaseModel):
    """
    A validated client frame: ``{"type": <event>, "data": <payload>}``.

    Attributes:
        type: Event name (authenticate, private-message, ping, ...)
        data: Event payload, passed to the matching use case untouched
    """

    type: str = Field(..., description="Event name")
    data: Optional[Any] = Field(None, description="Event payload")

    @field_validator("type")
    @classmethod
    def validate_type_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Event type cannot be empty")
        return v
