"""
Frame validation use case.

Validates incoming WebSocket frames for:
- Size limits
- JSON structure (NaN and Infinity are refused)
- Event envelope (type + data)
- String and array limits inside the payload
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from interprete.application.dto import InboundEvent

CONTROL_EVENTS = frozenset({"ping", "pong"})


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not a valid JSON value")


@dataclass
class FrameValidationResult:
    """Result of frame validation."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    event: Optional[InboundEvent] = None
    size_bytes: int = 0

    @property
    def event_type(self) -> Optional[str]:
        return self.event.type if self.event else None


class ValidateFrameUseCase:
    """Validates raw WebSocket text frames and parses the event envelope."""

    def __init__(
        self,
        max_message_size: int = 1_048_576,
        max_string_length: int = 1_048_576,
        max_array_size: int = 1000,
    ):
        """
        Initialize frame validator.

        Args:
            max_message_size: Maximum frame size in bytes
            max_string_length: Maximum string field length
            max_array_size: Maximum array field size
        """
        self.max_message_size = max_message_size
        self.max_string_length = max_string_length
        self.max_array_size = max_array_size

    def validate(self, raw_frame: str) -> FrameValidationResult:
        """
        Validate one incoming frame.

        Args:
            raw_frame: Raw text frame from the WebSocket

        Returns:
            FrameValidationResult; ``event`` is set only when valid
        """
        size_bytes = len(raw_frame.encode("utf-8"))
        if size_bytes > self.max_message_size:
            return FrameValidationResult(
                valid=False,
                errors=[
                    f"Message too large: {size_bytes} bytes "
                    f"(max: {self.max_message_size})"
                ],
                size_bytes=size_bytes,
            )

        try:
            message = json.loads(raw_frame, parse_constant=_reject_constant)
        except ValueError as e:
            return FrameValidationResult(
                valid=False, errors=[f"Invalid JSON: {e}"], size_bytes=size_bytes
            )

        if not isinstance(message, dict):
            return FrameValidationResult(
                valid=False,
                errors=["Message must be a JSON object"],
                size_bytes=size_bytes,
            )

        errors = self._validate_content(message)
        if errors:
            return FrameValidationResult(
                valid=False, errors=errors, size_bytes=size_bytes
            )

        try:
            event = InboundEvent(type=message.get("type"), data=message.get("data"))
        except ValidationError as e:
            return FrameValidationResult(
                valid=False,
                errors=[
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                ],
                size_bytes=size_bytes,
            )

        return FrameValidationResult(valid=True, event=event, size_bytes=size_bytes)

    def _validate_content(self, message: Dict[str, Any]) -> List[str]:
        """Check string lengths and array sizes recursively."""
        errors = []

        for key, value in message.items():
            if isinstance(value, str):
                if len(value) > self.max_string_length:
                    errors.append(
                        f"String field '{key}' too long: {len(value)} chars "
                        f"(max: {self.max_string_length})"
                    )

            elif isinstance(value, list):
                if len(value) > self.max_array_size:
                    errors.append(
                        f"Array field '{key}' too large: {len(value)} items "
                        f"(max: {self.max_array_size})"
                    )
                for i, item in enumerate(value):
                    if isinstance(item, dict):
                        for err in self._validate_content(item):
                            errors.append(f"{key}[{i}].{err}")

            elif isinstance(value, dict):
                for err in self._validate_content(value):
                    errors.append(f"{key}.{err}")

        return errors

    def is_control_event(self, event_type: Optional[str]) -> bool:
        """Keepalive frames handled by the transport loop itself."""
        return event_type in CONTROL_EVENTS
