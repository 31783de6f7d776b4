"""
Interprete Health Checker implementation.

Implements HealthChecker protocol from shared.health.
"""

import time
from typing import Optional

from shared.health import HealthCheck, HealthChecker, HealthReport, HealthStatus

from interprete.config.settings import Settings
from interprete.infrastructure.presence import PresenceRegistry
from interprete.infrastructure.shutdown import ShutdownManager
from interprete.infrastructure.websocket import ConnectionManager


class InterpreteHealthChecker(HealthChecker):
    """
    Health checker for the relay.

    Readiness checks:
    - presence registry answers lookups
    - no shutdown in progress
    - a translation provider is configured (DEGRADED otherwise; the relay
      still works without one)
    """

    def __init__(
        self,
        settings: Settings,
        presence_registry: Optional[PresenceRegistry] = None,
        connection_manager: Optional[ConnectionManager] = None,
        shutdown_manager: Optional[ShutdownManager] = None,
    ):
        self.settings = settings
        self.presence_registry = presence_registry
        self.connection_manager = connection_manager
        self.shutdown_manager = shutdown_manager

    def check_liveness(self) -> HealthReport:
        """Liveness probe: the process answers."""
        return HealthReport.from_checks(
            [
                HealthCheck(
                    name="service",
                    status=HealthStatus.HEALTHY,
                    message="Service is alive",
                )
            ],
            version=self.settings.APP_VERSION,
        )

    def check_readiness(self) -> HealthReport:
        """Readiness probe: the relay can accept and route traffic."""
        checks = [
            self._check_presence_registry(),
            self._check_shutdown(),
            self._check_translation_provider(),
        ]
        return HealthReport.from_checks(checks, version=self.settings.APP_VERSION)

    def _check_presence_registry(self) -> HealthCheck:
        if self.presence_registry is None:
            return HealthCheck(
                name="presence_registry",
                status=HealthStatus.UNHEALTHY,
                message="Presence registry not initialized",
            )

        start = time.time()
        try:
            online = self.presence_registry.count()
        except Exception as e:
            return HealthCheck(
                name="presence_registry",
                status=HealthStatus.UNHEALTHY,
                message=f"Registry check failed: {e}",
                duration=time.time() - start,
            )

        connections = (
            self.connection_manager.get_total_connections()
            if self.connection_manager
            else None
        )
        return HealthCheck(
            name="presence_registry",
            status=HealthStatus.HEALTHY,
            message=f"Operational ({online} users online)",
            duration=time.time() - start,
            metadata={"online_users": online, "connections": connections},
        )

    def _check_shutdown(self) -> HealthCheck:
        if self.shutdown_manager and self.shutdown_manager.is_shutting_down():
            return HealthCheck(
                name="lifecycle",
                status=HealthStatus.UNHEALTHY,
                message="Shutdown in progress",
                metadata=self.shutdown_manager.get_shutdown_info(),
            )
        return HealthCheck(
            name="lifecycle",
            status=HealthStatus.HEALTHY,
            message="Accepting connections",
        )

    def _check_translation_provider(self) -> HealthCheck:
        provider = self.settings.translation_provider
        if provider is None:
            return HealthCheck(
                name="translation_provider",
                status=HealthStatus.DEGRADED,
                message="No translation API key configured",
            )
        return HealthCheck(
            name="translation_provider",
            status=HealthStatus.HEALTHY,
            message=f"Using {provider}",
            metadata={"provider": provider},
        )
