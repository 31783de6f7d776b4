"""
Health check definitions and status types.

Services expose liveness and readiness as HealthReport objects built from
individual HealthCheck results.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Protocol


class HealthStatus(str, Enum):
    """Health status levels, ordered from best to worst."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    HealthStatus.HEALTHY: 0,
    HealthStatus.DEGRADED: 1,
    HealthStatus.UNHEALTHY: 2,
}


@dataclass
class HealthCheck:
    """Result of a single health check."""

    name: str
    status: HealthStatus
    message: Optional[str] = None
    duration: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"status": self.status.value}
        if self.message:
            result["message"] = self.message
        if self.duration is not None:
            result["duration"] = self.duration
        if self.metadata:
            result["metadata"] = self.metadata
        return result


@dataclass
class HealthReport:
    """
    Overall health report.

    The overall status is the worst status among its checks.
    """

    status: HealthStatus
    checks: Dict[str, HealthCheck]
    version: str
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @classmethod
    def from_checks(
        cls, checks: Iterable[HealthCheck], version: str
    ) -> "HealthReport":
        """Aggregate checks into a report."""
        by_name = {check.name: check for check in checks}
        status = max(
            (check.status for check in by_name.values()),
            key=lambda s: s.severity,
            default=HealthStatus.HEALTHY,
        )
        return cls(status=status, checks=by_name, version=version)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        return {
            "status": self.status.value,
            "timestamp": self.timestamp.isoformat(),
            "version": self.version,
            "checks": {
                name: check.to_dict() for name, check in self.checks.items()
            },
        }

    @property
    def is_healthy(self) -> bool:
        return self.status == HealthStatus.HEALTHY

    @property
    def is_ready(self) -> bool:
        """Healthy or degraded services still accept traffic."""
        return self.status in (HealthStatus.HEALTHY, HealthStatus.DEGRADED)


class HealthChecker(Protocol):
    """Protocol implemented by each service's health checker."""

    def check_liveness(self) -> HealthReport:
        """Is the process alive? Failure means restart it."""
        ...

    def check_readiness(self) -> HealthReport:
        """Can the service take traffic? Failure means route around it."""
        ...
