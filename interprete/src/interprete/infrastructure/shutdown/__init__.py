"""Graceful shutdown."""

from interprete.infrastructure.shutdown.shutdown_manager import (
    ShutdownManager,
    ShutdownState,
)

__all__ = ["ShutdownManager", "ShutdownState"]
