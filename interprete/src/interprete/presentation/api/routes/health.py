"""
Health check API routes.

Kubernetes-compatible liveness and readiness probes.
"""

from fastapi import APIRouter, Depends, Response, status

from interprete.di.container import Container
from interprete.infrastructure.monitoring import InterpreteHealthChecker
from interprete.presentation.api.dependencies import get_container

router = APIRouter(tags=["health"])


def get_health_checker(
    container: Container = Depends(get_container),
) -> InterpreteHealthChecker:
    """Dependency for health checker."""
    return container.get_health_checker()


@router.get("/health/live", status_code=status.HTTP_200_OK)
def liveness_probe(
    response: Response,
    health_checker: InterpreteHealthChecker = Depends(get_health_checker),
):
    """Liveness probe: 200 if alive, 503 otherwise."""
    report = health_checker.check_liveness()
    if not report.is_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return report.to_dict()


@router.get("/health/ready", status_code=status.HTTP_200_OK)
def readiness_probe(
    response: Response,
    health_checker: InterpreteHealthChecker = Depends(get_health_checker),
):
    """
    Readiness probe: 200 if ready (healthy or degraded), 503 otherwise.

    A missing translation key only degrades readiness; the relay keeps
    accepting connections.
    """
    report = health_checker.check_readiness()
    if not report.is_ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return report.to_dict()


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check_endpoint(
    response: Response,
    health_checker: InterpreteHealthChecker = Depends(get_health_checker),
):
    """General health check endpoint (alias for readiness)."""
    return readiness_probe(response, health_checker)
