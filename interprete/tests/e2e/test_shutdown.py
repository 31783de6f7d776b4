"""
E2E tests for graceful shutdown.

Usage:
    python interprete/tests/e2e/test_shutdown.py
    laborant interprete --e2e
"""

import asyncio
from unittest.mock import AsyncMock, Mock

from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient
from shared.tests import LaborantTest

from interprete.config.settings import Settings
from interprete.infrastructure.websocket import ConnectionHandle
from interprete.main import InterpreteApp
from interprete.presentation.api.dependencies import set_container


def _settings(**overrides) -> Settings:
    values = {
        "openrouter_api_key": None,
        "openai_api_key": None,
        "log_level": "warning",
        "shutdown_grace_period": 0,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _websocket() -> Mock:
    websocket = Mock()
    websocket.send_json = AsyncMock()
    websocket.close = AsyncMock()
    return websocket


class TestShutdown(LaborantTest):
    """E2E tests for connection draining and refusal on shutdown."""

    component_name = "interprete"
    test_category = "e2e"

    def teardown_test(self):
        set_container(None)

    async def test_shutdown_notifies_and_closes_connections(self):
        """Test open connections get a shutdown frame, then are closed."""
        self.reporter.info("Testing connection drain", context="Test")

        interprete = InterpreteApp(_settings())
        interprete.server = Mock()
        websocket = _websocket()
        interprete.container.connection_manager.add(ConnectionHandle(websocket))

        shutdown_manager = interprete.container.shutdown_manager
        shutdown_manager.register_shutdown_callback(
            interprete._graceful_shutdown_callback
        )
        await shutdown_manager.initiate_shutdown("SIGTERM")

        websocket.send_json.assert_awaited_once_with(
            {
                "type": "shutdown",
                "data": {"message": "Server is shutting down", "code": 1001},
            }
        )
        websocket.close.assert_awaited_once_with(code=1001, reason="Server shutdown")
        assert interprete.server.should_exit is True

    async def test_failing_socket_does_not_block_drain(self):
        """Test a dead socket does not stop the other connections closing."""
        interprete = InterpreteApp(_settings())
        broken, healthy = _websocket(), _websocket()
        broken.send_json.side_effect = RuntimeError("gone")
        broken.close.side_effect = RuntimeError("gone")
        for websocket in (broken, healthy):
            interprete.container.connection_manager.add(ConnectionHandle(websocket))

        await interprete._graceful_shutdown_callback()

        healthy.close.assert_awaited_once()

    async def test_container_close_drops_presence(self):
        """Test closing the container leaves nobody reachable."""
        interprete = InterpreteApp(_settings())
        registry = interprete.container.presence_registry
        registry.register("alice", ConnectionHandle(_websocket()))

        await interprete.container.close()

        assert registry.lookup("alice") is None
        assert registry.count() == 0

    # ================================================================
    # Shutdown tests
    # ================================================================

    def test_shutdown_refuses_connections(self):
        """Test new WebSocket connections are refused during shutdown."""
        self.reporter.info("Testing connection refusal on shutdown", context="Test")

        interprete = InterpreteApp(_settings())
        asyncio.run(interprete.container.shutdown_manager.initiate_shutdown("test"))

        with TestClient(interprete.app) as client:
            try:
                with client.websocket_connect("/ws"):
                    pass
                assert False, "Connection should have been refused"
            except WebSocketDisconnect as e:
                assert e.code == 1001

            ready = client.get("/health/ready")

        assert interprete.container.stats["connection_rejections"] == 1
        assert ready.status_code == 503
        assert ready.json()["checks"]["lifecycle"]["message"] == (
            "Shutdown in progress"
        )


if __name__ == "__main__":
    TestShutdown.run_as_main()
