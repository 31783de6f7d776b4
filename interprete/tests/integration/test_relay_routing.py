"""
Integration tests for the relay use cases wired through the Container.

Simulates several connections with mock sockets and checks presence,
delivery and cleanup across authenticate, route and disconnect.

Usage:
    python interprete/tests/integration/test_relay_routing.py
    laborant interprete --integration
"""

from unittest.mock import AsyncMock, Mock

from shared.tests import LaborantTest

from interprete.application.use_cases import RouteStatus
from interprete.config.settings import Settings
from interprete.di.container import Container
from interprete.infrastructure.websocket import ConnectionHandle


def _handle() -> ConnectionHandle:
    websocket = Mock()
    websocket.send_json = AsyncMock()
    return ConnectionHandle(websocket)


def _frames(handle: ConnectionHandle) -> list:
    return [c.args[0] for c in handle.websocket.send_json.call_args_list]


def _message(sender: str, receiver: str, text: str = "hi") -> dict:
    return {"senderId": sender, "receiverId": receiver, "text": text}


class TestRelayRouting(LaborantTest):
    """Integration tests for authenticate/route/disconnect together."""

    component_name = "interprete"
    test_category = "integration"

    def setup_test(self):
        settings = Settings(
            _env_file=None, openrouter_api_key=None, openai_api_key=None
        )
        self.container = Container(settings, reporter=self.reporter)
        self.authenticate = self.container.get_authenticate_use_case()
        self.router = self.container.get_route_message_use_case()
        self.disconnect = self.container.get_disconnect_use_case()

    async def _connect(self, user_id: str) -> ConnectionHandle:
        handle = _handle()
        await self.authenticate.execute(handle, {"userId": user_id})
        return handle

    # ================================================================
    # Conversation tests
    # ================================================================

    async def test_two_user_conversation(self):
        """Test alice and bob exchange messages in both directions."""
        self.reporter.info("Testing two-user conversation", context="Test")

        alice = await self._connect("alice")
        bob = await self._connect("bob")

        to_bob = await self.router.execute(alice, _message("alice", "bob", "hola"))
        to_alice = await self.router.execute(bob, _message("bob", "alice", "hey"))

        assert to_bob.delivered and to_alice.delivered
        assert [f["type"] for f in _frames(alice)] == [
            "message-sent",
            "private-message",
        ]
        assert [f["type"] for f in _frames(bob)] == [
            "private-message",
            "message-sent",
        ]
        assert _frames(bob)[0]["data"] == _frames(alice)[0]["data"]
        assert _frames(bob)[0]["data"]["text"] == "hola"

    async def test_third_party_receives_nothing(self):
        """Test a message to bob is never seen by carol."""
        alice = await self._connect("alice")
        await self._connect("bob")
        carol = await self._connect("carol")

        await self.router.execute(alice, _message("alice", "bob"))

        assert _frames(carol) == []

    # ================================================================
    # Presence lifecycle tests
    # ================================================================

    async def test_disconnected_receiver_is_dropped(self):
        """Test messages to a user who left are acknowledged but dropped."""
        self.reporter.info("Testing delivery after disconnect", context="Test")

        alice = await self._connect("alice")
        bob = await self._connect("bob")
        self.disconnect.execute(bob)

        result = await self.router.execute(alice, _message("alice", "bob"))

        assert result.status == RouteStatus.DROPPED
        assert _frames(bob) == []
        assert _frames(alice)[0]["type"] == "message-sent"

    async def test_reconnect_receives_on_new_connection(self):
        """Test only the newest connection of a user receives messages."""
        self.reporter.info("Testing reconnect routing", context="Test")

        alice = await self._connect("alice")
        old_bob = await self._connect("bob")
        new_bob = await self._connect("bob")

        # The replaced connection closing later must not hide bob
        self.disconnect.execute(old_bob)
        await self.router.execute(alice, _message("alice", "bob"))

        assert _frames(old_bob) == []
        assert _frames(new_bob)[0]["type"] == "private-message"

    async def test_reauthenticated_connection_reachable_under_both_ids(self):
        """Test both identities of a switched connection stay routable."""
        alice = await self._connect("alice")
        shared = await self._connect("bob")
        await self.authenticate.execute(shared, {"userId": "carol"})

        await self.router.execute(alice, _message("alice", "bob"))
        await self.router.execute(alice, _message("alice", "carol"))

        assert len(_frames(shared)) == 2

        self.disconnect.execute(shared)
        registry = self.container.presence_registry
        assert registry.lookup("alice") is alice
        assert registry.count() == 1


if __name__ == "__main__":
    TestRelayRouting.run_as_main()
