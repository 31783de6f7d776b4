"""WebSocket infrastructure."""

from interprete.infrastructure.websocket.connection_handle import ConnectionHandle
from interprete.infrastructure.websocket.connection_manager import ConnectionManager

__all__ = ["ConnectionHandle", "ConnectionManager"]
