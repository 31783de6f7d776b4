"""
Use case for cleaning up presence when a connection closes.
"""

from typing import List, Optional

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji

from interprete.infrastructure.presence import PresenceRegistry
from interprete.infrastructure.websocket import ConnectionHandle


class DisconnectUserUseCase:
    """
    Removes every registry entry owned by a closing connection.

    Entries that another connection has since taken over are left alone.
    """

    def __init__(
        self,
        presence_registry: PresenceRegistry,
        reporter: Optional[SystemReporter] = None,
    ):
        self.presence_registry = presence_registry
        self.reporter = reporter

    def execute(self, handle: ConnectionHandle) -> List[str]:
        """
        Deregister a closing connection.

        Returns:
            User ids that were removed from the registry
        """
        removed = self.presence_registry.deregister_connection(handle)
        handle.connection.terminate()

        if self.reporter and handle.user_id:
            self.reporter.info(
                f"{Emoji.SYSTEM.UNREGISTER} User disconnected: {handle.user_id}",
                context="Disconnect",
                verbose_level=1,
            )
        return removed
