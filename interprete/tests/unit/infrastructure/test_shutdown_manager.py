"""
Unit tests for ShutdownManager.

Tests graceful shutdown coordination and state management.

Usage:
    python interprete/tests/unit/infrastructure/test_shutdown_manager.py
    laborant interprete --unit
"""

import asyncio
import threading

from shared.tests import LaborantTest

from interprete.infrastructure.shutdown import ShutdownManager
from interprete.infrastructure.shutdown.shutdown_manager import ShutdownState


class TestShutdownManager(LaborantTest):
    """Unit tests for ShutdownManager."""

    component_name = "interprete"
    test_category = "unit"

    # ================================================================
    # Initialization tests
    # ================================================================

    def test_initialization_defaults(self):
        """Test ShutdownManager initializes in RUNNING state."""
        self.reporter.info("Testing initialization defaults", context="Test")

        manager = ShutdownManager(shutdown_timeout=30, grace_period=5)

        assert manager.state == ShutdownState.RUNNING
        assert manager.shutdown_started_at is None
        assert manager.is_running() is True
        assert manager.is_shutting_down() is False

    # ================================================================
    # Shutdown sequence tests
    # ================================================================

    async def test_initiate_shutdown_changes_state(self):
        """Test initiate_shutdown moves to SHUTTING_DOWN."""
        self.reporter.info("Testing shutdown state change", context="Test")

        manager = ShutdownManager(reporter=self.reporter)
        await manager.initiate_shutdown("SIGTERM")

        assert manager.state == ShutdownState.SHUTTING_DOWN
        assert manager.is_shutting_down() is True
        assert manager.shutdown_started_at is not None
        assert manager.get_shutdown_info()["reason"] == "SIGTERM"

    async def test_callbacks_run_in_order(self):
        """Test sync and async callbacks run in registration order."""
        manager = ShutdownManager()
        calls = []

        async def first():
            calls.append("first")

        def second():
            calls.append("second")

        manager.register_shutdown_callback(first)
        manager.register_shutdown_callback(second)
        await manager.initiate_shutdown()

        assert calls == ["first", "second"]

    async def test_initiate_shutdown_is_idempotent(self):
        """Test callbacks run only on the first call."""
        manager = ShutdownManager()
        calls = []
        manager.register_shutdown_callback(lambda: calls.append(1))

        await manager.initiate_shutdown("first")
        await manager.initiate_shutdown("second")

        assert calls == [1]
        assert manager.shutdown_reason == "first"

    async def test_failing_callback_does_not_stop_others(self):
        """Test a raising callback is logged and the rest still run."""
        self.reporter.info("Testing failing callback", context="Test")

        manager = ShutdownManager(reporter=self.reporter)
        calls = []

        def broken():
            raise RuntimeError("boom")

        manager.register_shutdown_callback(broken)
        manager.register_shutdown_callback(lambda: calls.append("after"))
        await manager.initiate_shutdown()

        assert calls == ["after"]

    async def test_slow_callback_times_out(self):
        """Test callbacks are bounded by shutdown_timeout."""
        manager = ShutdownManager(shutdown_timeout=1)
        calls = []

        async def slow():
            await asyncio.sleep(10)

        manager.register_shutdown_callback(slow)
        manager.register_shutdown_callback(lambda: calls.append("after"))
        await manager.initiate_shutdown()

        assert calls == ["after"]

    def test_mark_shutdown_complete(self):
        """Test mark_shutdown_complete moves to SHUTDOWN."""
        manager = ShutdownManager()
        manager.mark_shutdown_complete()

        assert manager.state == ShutdownState.SHUTDOWN
        assert manager.get_shutdown_info()["state"] == "shutdown"

    # ================================================================
    # Signal handler tests
    # ================================================================

    def test_signal_handlers_need_main_thread(self):
        """Test signal handlers are not installed off the main thread."""
        manager = ShutdownManager()
        results = []

        def worker():
            loop = asyncio.new_event_loop()
            try:
                results.append(manager.setup_signal_handlers(loop))
            finally:
                loop.close()

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert results == [False]

    def test_restore_without_handlers_is_noop(self):
        """Test restore is safe when nothing was installed."""
        manager = ShutdownManager()
        manager.restore_signal_handlers()

        assert manager.is_running() is True


if __name__ == "__main__":
    TestShutdownManager.run_as_main()
