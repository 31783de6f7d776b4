"""
Graceful shutdown manager.

Handles:
- Signal registration (SIGTERM, SIGINT) on the running event loop
- Shutdown state tracking
- Ordered shutdown callbacks
"""

import asyncio
import signal
import threading
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji


class ShutdownState(Enum):
    """Shutdown state enum."""

    RUNNING = "running"
    SHUTTING_DOWN = "shutting_down"
    SHUTDOWN = "shutdown"


class ShutdownManager:
    """
    Coordinates graceful shutdown of the relay.

    Sequence:
    1. Signal (or manual call) moves RUNNING -> SHUTTING_DOWN
    2. New WebSocket connections are refused from then on
    3. Registered callbacks run in registration order
    4. mark_shutdown_complete() moves to SHUTDOWN

    Attributes:
        state: Current shutdown state
        shutdown_timeout: Max seconds to wait for shutdown
        grace_period: Seconds clients get to close after notification
        shutdown_started_at: Timestamp when shutdown initiated
    """

    def __init__(
        self,
        shutdown_timeout: int = 30,
        grace_period: int = 5,
        reporter: Optional[SystemReporter] = None,
    ):
        self.shutdown_timeout = shutdown_timeout
        self.grace_period = grace_period
        self.reporter = reporter

        self.state = ShutdownState.RUNNING
        self.shutdown_started_at: Optional[datetime] = None
        self.shutdown_reason: Optional[str] = None
        self._shutdown_callbacks: List[Callable] = []
        self._signals_installed: List[signal.Signals] = []

    def is_shutting_down(self) -> bool:
        return self.state in (ShutdownState.SHUTTING_DOWN, ShutdownState.SHUTDOWN)

    def is_running(self) -> bool:
        return self.state == ShutdownState.RUNNING

    def register_shutdown_callback(self, callback: Callable) -> None:
        """
        Register a sync or async callable to run on shutdown.

        Callbacks are called in registration order.
        """
        self._shutdown_callbacks.append(callback)

    def setup_signal_handlers(
        self, loop: Optional[asyncio.AbstractEventLoop] = None
    ) -> bool:
        """
        Route SIGTERM/SIGINT to initiate_shutdown on the event loop.

        Only possible from the main thread of a loop that supports
        signal handlers.

        Returns:
            True if handlers were installed
        """
        if threading.current_thread() is not threading.main_thread():
            return False

        loop = loop or asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            try:
                loop.add_signal_handler(
                    sig,
                    lambda s=sig: asyncio.ensure_future(
                        self.initiate_shutdown(s.name)
                    ),
                )
            except (NotImplementedError, RuntimeError):
                return False
            self._signals_installed.append(sig)
        return True

    def restore_signal_handlers(
        self, loop: Optional[asyncio.AbstractEventLoop] = None
    ) -> None:
        if not self._signals_installed:
            return
        loop = loop or asyncio.get_running_loop()
        for sig in self._signals_installed:
            loop.remove_signal_handler(sig)
        self._signals_installed = []

    async def initiate_shutdown(self, reason: str = "manual") -> None:
        """
        Initiate graceful shutdown sequence.

        Idempotent: only the first call runs the callbacks.

        Args:
            reason: Reason for shutdown (signal name, lifespan, etc.)
        """
        if self.state != ShutdownState.RUNNING:
            return

        self.state = ShutdownState.SHUTTING_DOWN
        self.shutdown_started_at = datetime.now(timezone.utc)
        self.shutdown_reason = reason

        if self.reporter:
            self.reporter.info(
                f"{Emoji.SYSTEM.SHUTDOWN} Graceful shutdown initiated ({reason})",
                context="ShutdownManager",
                verbose_level=1,
            )

        for callback in self._shutdown_callbacks:
            try:
                result = callback()
                if asyncio.iscoroutine(result):
                    await asyncio.wait_for(result, timeout=self.shutdown_timeout)
            except Exception as e:
                # Remaining callbacks still run
                if self.reporter:
                    self.reporter.error(
                        f"{Emoji.ERROR.ERROR} Shutdown callback "
                        f"{getattr(callback, '__name__', callback)} failed: {e}",
                        context="ShutdownManager",
                    )

    def mark_shutdown_complete(self) -> None:
        self.state = ShutdownState.SHUTDOWN

    def get_shutdown_info(self) -> dict:
        """Shutdown status for health and stats endpoints."""
        return {
            "state": self.state.value,
            "is_shutting_down": self.is_shutting_down(),
            "reason": self.shutdown_reason,
            "shutdown_started_at": (
                self.shutdown_started_at.isoformat()
                if self.shutdown_started_at
                else None
            ),
            "shutdown_timeout": self.shutdown_timeout,
            "grace_period": self.grace_period,
        }
