"""
Use case for routing a private message between two users.

Outcomes for the sender are deliberately indistinguishable: a message
to an offline user is acknowledged exactly like a delivered one.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji

from interprete.domain.exceptions import SENDER_MISMATCH, InvalidMessageError
from interprete.domain.value_objects import (
    PrivateMessage,
    ResolvedMessage,
    generate_message_id,
)
from interprete.infrastructure.presence import PresenceRegistry
from interprete.infrastructure.websocket import ConnectionHandle

PRIVATE_MESSAGE_EVENT = "private-message"
MESSAGE_SENT_EVENT = "message-sent"
ERROR_EVENT = "error"


class RouteStatus(str, Enum):
    """What happened to a routed message."""

    DELIVERED = "delivered"
    DROPPED = "dropped"
    REJECTED = "rejected"


@dataclass
class RouteResult:
    """Outcome of one routing call (server-side only)."""

    status: RouteStatus
    message: Optional[ResolvedMessage] = None
    reason: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.status == RouteStatus.DELIVERED


class RoutePrivateMessageUseCase:
    """
    Validate, stamp, deliver and acknowledge a private message.

    1. senderId and receiverId must be non-empty strings, otherwise the
       sender gets one error event and nothing else happens.
    2. The message gets a fresh id and timestamp.
    3. If the receiver is online it gets a private-message event.
    4. The sender always gets a message-sent event with the same record.
    """

    def __init__(
        self,
        presence_registry: PresenceRegistry,
        reporter: Optional[SystemReporter] = None,
        enforce_sender_identity: bool = False,
        id_factory: Callable[[], str] = generate_message_id,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize router.

        Args:
            presence_registry: Registry used to find the receiver
            reporter: Optional reporter
            enforce_sender_identity: Reject messages whose senderId is not
                the identity the sending connection authenticated as
            id_factory: Message id generator
            clock: Timestamp source (defaults to current UTC time)
        """
        self.presence_registry = presence_registry
        self.reporter = reporter
        self.enforce_sender_identity = enforce_sender_identity
        self.id_factory = id_factory
        self.clock = clock

    async def execute(self, sender: ConnectionHandle, payload: Any) -> RouteResult:
        """
        Route one private message.

        Args:
            sender: Connection the message arrived on
            payload: Raw private-message payload

        Returns:
            RouteResult describing the outcome
        """
        try:
            message = PrivateMessage.from_payload(payload)
            self._check_sender_identity(sender, message)
        except InvalidMessageError as e:
            if self.reporter:
                self.reporter.warning(
                    f"{Emoji.ERROR.VALIDATION_ERROR} Message rejected: "
                    f"{e.reason} (connection={sender.id})",
                    context="Router",
                    verbose_level=2,
                )
            await sender.emit(ERROR_EVENT, {"message": e.reason})
            return RouteResult(status=RouteStatus.REJECTED, reason=e.reason)

        resolved = message.resolve(id_factory=self.id_factory, clock=self.clock)
        record = resolved.to_payload()

        status = RouteStatus.DROPPED
        receiver = self.presence_registry.lookup(message.receiver_id)
        if receiver is not None and await self._deliver(receiver, resolved, record):
            status = RouteStatus.DELIVERED
        elif receiver is None and self.reporter:
            self.reporter.debug(
                f"{Emoji.MESSAGE.DROPPED} {resolved.id}: "
                f"{message.receiver_id} is offline",
                context="Router",
            )

        await sender.emit(MESSAGE_SENT_EVENT, dict(record))
        return RouteResult(status=status, message=resolved)

    def _check_sender_identity(
        self, sender: ConnectionHandle, message: PrivateMessage
    ) -> None:
        if self.enforce_sender_identity and sender.user_id != message.sender_id:
            raise InvalidMessageError(SENDER_MISMATCH)

    async def _deliver(
        self, receiver: ConnectionHandle, resolved: ResolvedMessage, record: dict
    ) -> bool:
        """Push to the receiver; a dead receiver counts as a miss."""
        try:
            await receiver.emit(PRIVATE_MESSAGE_EVENT, dict(record))
        except Exception as e:
            if self.reporter:
                self.reporter.warning(
                    f"{Emoji.MESSAGE.FAILED} Delivery of {resolved.id} to "
                    f"{resolved.receiver_id} failed: {e}",
                    context="Router",
                    verbose_level=1,
                )
            return False

        if self.reporter:
            self.reporter.debug(
                f"{Emoji.MESSAGE.DELIVERED} {resolved.id}: "
                f"{resolved.sender_id} -> {resolved.receiver_id}",
                context="Router",
            )
        return True
