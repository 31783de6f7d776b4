"""
Connection entity - state of one live WebSocket connection.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from interprete.domain.value_objects.user_id import UserId


class ConnectionState(str, Enum):
    """Per-connection lifecycle states."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    TERMINATED = "terminated"


class Connection:
    """
    Connection entity.

    Starts unauthenticated, may authenticate any number of times (the
    latest identity wins) and ends terminated.

    Attributes:
        id: Connection identifier (conn_<12 hex>)
        user_id: Identity asserted by the last authenticate, if any
        email: Email sent with the last authenticate (log only)
        state: Current ConnectionState
        connected_at: When the connection was accepted
        authenticated_at: When the connection last authenticated
    """

    def __init__(
        self,
        connection_id: Optional[str] = None,
        connected_at: Optional[datetime] = None,
    ):
        self.id: str = connection_id or f"conn_{uuid4().hex[:12]}"
        self.user_id: Optional[str] = None
        self.email: Optional[str] = None
        self.state: ConnectionState = ConnectionState.UNAUTHENTICATED
        self.connected_at: datetime = connected_at or datetime.now(timezone.utc)
        self.authenticated_at: Optional[datetime] = None
        self.messages_received: int = 0

    def authenticate(
        self, user_id: UserId, email: Optional[str] = None
    ) -> Optional[str]:
        """
        Associate an identity with this connection.

        Args:
            user_id: Asserted identity
            email: Optional email (kept for logging only)

        Returns:
            The previously associated user id, if any

        Raises:
            ValueError: If the connection is already terminated
        """
        if self.state == ConnectionState.TERMINATED:
            raise ValueError(f"Connection {self.id} is terminated")

        previous = self.user_id
        self.user_id = user_id.value
        self.email = email
        self.state = ConnectionState.AUTHENTICATED
        self.authenticated_at = datetime.now(timezone.utc)
        return previous

    def terminate(self) -> None:
        self.state = ConnectionState.TERMINATED

    def is_authenticated(self) -> bool:
        return self.state == ConnectionState.AUTHENTICATED

    def is_terminated(self) -> bool:
        return self.state == ConnectionState.TERMINATED

    def duration_seconds(self) -> float:
        return (datetime.now(timezone.utc) - self.connected_at).total_seconds()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Connection):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        auth = f"user_id={self.user_id}" if self.user_id else "unauthenticated"
        return f"Connection(id={self.id}, {auth}, state={self.state.value})"
