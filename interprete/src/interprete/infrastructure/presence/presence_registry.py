"""
Presence registry - which user is reachable through which connection.
"""

import threading
from typing import Dict, Generic, List, Optional, TypeVar

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji

H = TypeVar("H")


class PresenceRegistry(Generic[H]):
    """
    Mapping from user identifier to the live connection handle.

    One handle per identifier: registering an identifier again replaces
    the previous handle (last writer wins). The replaced handle is not
    closed or notified.

    Every operation holds the registry lock, so concurrent callers observe
    a single total order of register/deregister/lookup.
    """

    def __init__(self, reporter: Optional[SystemReporter] = None):
        self._entries: Dict[str, H] = {}
        self._lock = threading.Lock()
        self.reporter = reporter

    def register(self, user_id: str, handle: H) -> None:
        """Associate user_id with handle, replacing any existing handle."""
        with self._lock:
            previous = self._entries.get(user_id)
            self._entries[user_id] = handle
            total = len(self._entries)

        if not self.reporter:
            return
        if previous is not None and previous is not handle:
            self.reporter.warning(
                f"{Emoji.SYSTEM.REGISTER} Presence replaced: user={user_id} "
                f"(previous connection no longer reachable)",
                context="PresenceRegistry",
                verbose_level=1,
            )
        else:
            self.reporter.debug(
                f"{Emoji.SYSTEM.REGISTER} Registered user={user_id} "
                f"(online={total})",
                context="PresenceRegistry",
            )

    def lookup(self, user_id: str) -> Optional[H]:
        """Current handle for user_id, or None if offline."""
        with self._lock:
            return self._entries.get(user_id)

    def deregister(self, user_id: str, handle: Optional[H] = None) -> bool:
        """
        Remove the entry for user_id.

        Args:
            user_id: Identifier to remove (absent identifiers are a no-op)
            handle: When given, remove only if the entry still points at
                this handle

        Returns:
            True if an entry was removed
        """
        with self._lock:
            current = self._entries.get(user_id)
            if current is None:
                return False
            if handle is not None and current is not handle:
                return False
            del self._entries[user_id]

        if self.reporter:
            self.reporter.debug(
                f"{Emoji.SYSTEM.UNREGISTER} Deregistered user={user_id}",
                context="PresenceRegistry",
            )
        return True

    def deregister_connection(self, handle: H) -> List[str]:
        """
        Remove every entry pointing at handle.

        Returns:
            Identifiers that were removed
        """
        with self._lock:
            removed = [
                user_id
                for user_id, current in self._entries.items()
                if current is handle
            ]
            for user_id in removed:
                del self._entries[user_id]

        if removed and self.reporter:
            self.reporter.debug(
                f"{Emoji.SYSTEM.UNREGISTER} Deregistered users={removed}",
                context="PresenceRegistry",
            )
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return self.count()
