"""
Connection handle - a Connection entity bound to its WebSocket.
"""

from typing import Any, Optional

from fastapi import WebSocket

from interprete.domain.entities import Connection


class ConnectionHandle:
    """
    Opaque reference used to push events to one client.

    Frames are JSON objects of the form ``{"type": event, "data": data}``.
    """

    def __init__(self, websocket: WebSocket, connection: Optional[Connection] = None):
        self.websocket = websocket
        self.connection = connection or Connection()
        self.frames_sent = 0

    @property
    def id(self) -> str:
        return self.connection.id

    @property
    def user_id(self) -> Optional[str]:
        return self.connection.user_id

    async def emit(self, event: str, data: Any = None) -> None:
        """Send one event frame to the client."""
        frame = {"type": event}
        if data is not None:
            frame["data"] = data
        await self.websocket.send_json(frame)
        self.frames_sent += 1

    async def close(self, code: int = 1000, reason: str = "") -> None:
        await self.websocket.close(code=code, reason=reason)

    def __repr__(self) -> str:
        return f"ConnectionHandle({self.connection!r})"
