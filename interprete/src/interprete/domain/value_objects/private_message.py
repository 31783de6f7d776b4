"""
PrivateMessage value objects - inbound message and its resolved form.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
from uuid import uuid4

from interprete.domain.exceptions import (
    SENDER_RECEIVER_REQUIRED,
    InvalidMessageError,
)
from interprete.domain.value_objects.user_id import UserId

# Wire field names carried from an inbound payload, in output order.
MESSAGE_FIELDS = (
    "senderId",
    "receiverId",
    "text",
    "originalText",
    "targetLanguage",
    "originalLanguage",
)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + (
        f"{moment.microsecond // 1000:03d}Z"
    )


def generate_message_id() -> str:
    return uuid4().hex


class PrivateMessage:
    """
    Value object for a user-to-user message as submitted by the sender.

    Only senderId and receiverId are validated. Text and language fields
    are opaque; fields absent from the payload stay absent.

    Attributes:
        sender_id: Sender's user identifier
        receiver_id: Recipient's user identifier
    """

    def __init__(self, fields: Dict[str, Any]):
        """
        Initialize PrivateMessage.

        Args:
            fields: Wire fields (camelCase) of the message

        Raises:
            InvalidMessageError: If sender or receiver id is missing or empty
        """
        sender = fields.get("senderId")
        receiver = fields.get("receiverId")
        if not (UserId.is_valid(sender) and UserId.is_valid(receiver)):
            raise InvalidMessageError(SENDER_RECEIVER_REQUIRED)

        self._fields = {k: fields[k] for k in MESSAGE_FIELDS if k in fields}

    @classmethod
    def from_payload(cls, payload: Any) -> "PrivateMessage":
        """Build from a raw client payload; non-dict payloads are invalid."""
        if not isinstance(payload, dict):
            raise InvalidMessageError(SENDER_RECEIVER_REQUIRED)
        return cls(payload)

    @property
    def sender_id(self) -> str:
        return self._fields["senderId"]

    @property
    def receiver_id(self) -> str:
        return self._fields["receiverId"]

    @property
    def text(self) -> Optional[Any]:
        return self._fields.get("text")

    @property
    def fields(self) -> Dict[str, Any]:
        """Copy of the carried wire fields."""
        return dict(self._fields)

    def resolve(
        self,
        id_factory: Callable[[], str] = generate_message_id,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> "ResolvedMessage":
        """Stamp the message with a fresh id and the current time."""
        now = clock() if clock else datetime.now(timezone.utc)
        return ResolvedMessage(message=self, id=id_factory(), timestamp=now)

    def __repr__(self) -> str:
        return (
            f"PrivateMessage(sender={self.sender_id}, "
            f"receiver={self.receiver_id})"
        )


@dataclass(frozen=True)
class ResolvedMessage:
    """
    A private message with server-assigned id and timestamp.

    The same record is delivered to the receiver and echoed to the sender.
    """

    message: PrivateMessage
    id: str
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def sender_id(self) -> str:
        return self.message.sender_id

    @property
    def receiver_id(self) -> str:
        return self.message.receiver_id

    def to_payload(self) -> Dict[str, Any]:
        """Wire form: id, the carried fields, timestamp."""
        return {
            "id": self.id,
            **self.message.fields,
            "timestamp": format_timestamp(self.timestamp),
        }
