"""
Use case for binding a connection to the identity its client asserts.
"""

from typing import Any, Optional

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji

from interprete.domain.exceptions import InvalidMessageError
from interprete.domain.value_objects import UserId
from interprete.infrastructure.presence import PresenceRegistry
from interprete.infrastructure.websocket import ConnectionHandle


class AuthenticateUserUseCase:
    """
    Registers ``payload.userId`` as reachable through the connection.

    The identity is trusted as asserted. Re-authenticating replaces the
    registry entry for the new identifier; an entry the connection held
    under an older identifier stays until the connection closes.
    """

    def __init__(
        self,
        presence_registry: PresenceRegistry,
        reporter: Optional[SystemReporter] = None,
    ):
        self.presence_registry = presence_registry
        self.reporter = reporter

    async def execute(self, handle: ConnectionHandle, payload: Any) -> Optional[str]:
        """
        Authenticate a connection.

        Args:
            handle: Connection sending the authenticate event
            payload: ``{"userId": ..., "email": ...}``

        Returns:
            Registered user id, or None if the payload was rejected (an
            error event is sent to the client in that case)
        """
        data = payload if isinstance(payload, dict) else {}
        email = data.get("email")
        if not isinstance(email, str):
            email = None

        try:
            user_id = UserId(data.get("userId"))
        except InvalidMessageError as e:
            if self.reporter:
                self.reporter.warning(
                    f"{Emoji.ERROR.VALIDATION_ERROR} Authentication rejected: "
                    f"{e.reason} (connection={handle.id})",
                    context="Authenticate",
                    verbose_level=1,
                )
            await handle.emit("error", {"message": e.reason})
            return None

        previous = handle.connection.authenticate(user_id, email)
        self.presence_registry.register(user_id.value, handle)

        if self.reporter:
            self.reporter.info(
                f"User authenticated: {user_id} ({email})",
                context="Authenticate",
                verbose_level=1,
            )
            if previous and previous != user_id.value:
                self.reporter.info(
                    f"Connection {handle.id} switched identity "
                    f"{previous} -> {user_id}",
                    context="Authenticate",
                    verbose_level=2,
                )

        return user_id.value
