"""Monitoring for Interprete."""

from interprete.infrastructure.monitoring.interprete_health_checker import (
    InterpreteHealthChecker,
)

__all__ = ["InterpreteHealthChecker"]
