"""
Dependency Injection container for Interprete.

Manages lifecycle and dependencies of all application components.
"""

from datetime import datetime, timezone
from typing import Optional

from shared.reporter import SystemReporter

from interprete.application.use_cases import (
    AuthenticateUserUseCase,
    DisconnectUserUseCase,
    RoutePrivateMessageUseCase,
    TranslateTextUseCase,
    ValidateFrameUseCase,
)
from interprete.config.settings import Settings
from interprete.infrastructure.monitoring import InterpreteHealthChecker
from interprete.infrastructure.presence import PresenceRegistry
from interprete.infrastructure.shutdown import ShutdownManager
from interprete.infrastructure.translation import (
    ChatCompletionClient,
    resolve_provider,
)
from interprete.infrastructure.websocket import ConnectionManager


class Container:
    """
    Dependency Injection container.

    Shared resources (registry, connection manager, HTTP client) are lazy
    singletons; use cases are cheap and built on demand.
    """

    def __init__(self, settings: Settings, reporter: Optional[SystemReporter] = None):
        """
        Initialize container with settings.

        Args:
            settings: Application settings
            reporter: Reporter handed to every component (stdout if omitted)
        """
        self.settings = settings
        self.reporter = reporter or SystemReporter(name="interprete")

        self._presence_registry: Optional[PresenceRegistry] = None
        self._connection_manager: Optional[ConnectionManager] = None
        self._shutdown_manager: Optional[ShutdownManager] = None
        self._completion_client: Optional[ChatCompletionClient] = None
        self._validate_frame_use_case: Optional[ValidateFrameUseCase] = None

        # Statistics
        self.stats = {
            "total_connections": 0,
            "total_messages_received": 0,
            "messages_routed": 0,
            "messages_delivered": 0,
            "messages_dropped": 0,
            "messages_rejected": 0,
            "validation_failures": 0,
            "connection_rejections": 0,
            "translations_requested": 0,
            "translations_failed": 0,
            "start_time": datetime.now(timezone.utc),
        }

    @property
    def presence_registry(self) -> PresenceRegistry:
        """Get PresenceRegistry singleton."""
        if self._presence_registry is None:
            self._presence_registry = PresenceRegistry(reporter=self.reporter)
        return self._presence_registry

    @property
    def connection_manager(self) -> ConnectionManager:
        """Get ConnectionManager singleton."""
        if self._connection_manager is None:
            self._connection_manager = ConnectionManager(reporter=self.reporter)
        return self._connection_manager

    @property
    def shutdown_manager(self) -> ShutdownManager:
        """Get ShutdownManager singleton."""
        if self._shutdown_manager is None:
            self._shutdown_manager = ShutdownManager(
                shutdown_timeout=self.settings.shutdown_timeout,
                grace_period=self.settings.shutdown_grace_period,
                reporter=self.reporter,
            )
        return self._shutdown_manager

    @property
    def completion_client(self) -> Optional[ChatCompletionClient]:
        """
        Get ChatCompletionClient singleton.

        Returns:
            Client for the configured provider, or None without credentials
        """
        if self._completion_client is None:
            provider = resolve_provider(self.settings)
            if provider is None:
                return None
            self._completion_client = ChatCompletionClient(
                provider=provider,
                temperature=self.settings.translation_temperature,
                max_tokens=self.settings.translation_max_tokens,
                timeout=self.settings.translation_timeout,
            )
        return self._completion_client

    def set_completion_client(self, client: Optional[ChatCompletionClient]) -> None:
        """Replace the completion client (tests inject mock transports)."""
        self._completion_client = client

    def get_health_checker(self) -> InterpreteHealthChecker:
        return InterpreteHealthChecker(
            settings=self.settings,
            presence_registry=self.presence_registry,
            connection_manager=self.connection_manager,
            shutdown_manager=self.shutdown_manager,
        )

    def get_validate_frame_use_case(self) -> ValidateFrameUseCase:
        """Get ValidateFrameUseCase singleton with configured limits."""
        if self._validate_frame_use_case is None:
            self._validate_frame_use_case = ValidateFrameUseCase(
                max_message_size=self.settings.max_message_size,
                max_string_length=self.settings.max_string_length,
                max_array_size=self.settings.max_array_size,
            )
        return self._validate_frame_use_case

    def get_authenticate_use_case(self) -> AuthenticateUserUseCase:
        return AuthenticateUserUseCase(self.presence_registry, self.reporter)

    def get_route_message_use_case(self) -> RoutePrivateMessageUseCase:
        return RoutePrivateMessageUseCase(
            self.presence_registry,
            reporter=self.reporter,
            enforce_sender_identity=self.settings.enforce_sender_identity,
        )

    def get_disconnect_use_case(self) -> DisconnectUserUseCase:
        return DisconnectUserUseCase(self.presence_registry, self.reporter)

    def get_translate_use_case(self) -> TranslateTextUseCase:
        return TranslateTextUseCase(self.completion_client, self.reporter)

    def increment_stat(self, stat_name: str, amount: int = 1) -> None:
        """Increment a statistic counter (unknown names are ignored)."""
        if stat_name in self.stats:
            self.stats[stat_name] += amount

    def get_uptime_seconds(self) -> float:
        return (datetime.now(timezone.utc) - self.stats["start_time"]).total_seconds()

    async def close(self) -> None:
        """Release network resources and drop presence."""
        if self._completion_client is not None:
            await self._completion_client.close()
        self.presence_registry.clear()
