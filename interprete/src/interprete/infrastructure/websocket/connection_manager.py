"""
Tracks every live WebSocket connection, authenticated or not.
"""

from typing import Dict, List, Optional

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji

from interprete.infrastructure.websocket.connection_handle import ConnectionHandle


class ConnectionManager:
    """Live connection handles keyed by connection id."""

    def __init__(self, reporter: Optional[SystemReporter] = None):
        self.connections: Dict[str, ConnectionHandle] = {}
        self.reporter = reporter

    def add(self, handle: ConnectionHandle) -> None:
        self.connections[handle.id] = handle
        if self.reporter:
            self.reporter.info(
                f"{Emoji.NETWORK.CONNECTED} Client added: "
                f"connection={handle.id}, total={len(self.connections)}",
                context="ConnectionManager",
                verbose_level=2,
            )

    def remove(self, handle: ConnectionHandle) -> None:
        removed = self.connections.pop(handle.id, None)
        if removed and self.reporter:
            self.reporter.info(
                f"{Emoji.NETWORK.DISCONNECTED} Client removed: "
                f"connection={handle.id}, user={handle.user_id}, "
                f"total={len(self.connections)}",
                context="ConnectionManager",
                verbose_level=2,
            )

    def get(self, connection_id: str) -> Optional[ConnectionHandle]:
        return self.connections.get(connection_id)

    def all(self) -> List[ConnectionHandle]:
        return list(self.connections.values())

    def get_total_connections(self) -> int:
        return len(self.connections)

    def get_authenticated_count(self) -> int:
        return sum(
            1 for h in self.connections.values() if h.connection.is_authenticated()
        )
