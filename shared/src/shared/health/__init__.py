"""
Health check primitives for Interprete services.

Provides liveness and readiness reports compatible with
Kubernetes-style probes.
"""

from shared.health.checks import (
    HealthChecker,
    HealthCheck,
    HealthReport,
    HealthStatus,
)

__all__ = [
    "HealthChecker",
    "HealthStatus",
    "HealthCheck",
    "HealthReport",
]
