"""
FastAPI dependencies for Interprete API.

Provides dependency injection for routes.
"""

from typing import Optional

from interprete.di.container import Container

# Global container (initialized in main.py)
_container: Optional[Container] = None


def get_container() -> Container:
    """
    Get DI container instance.

    Raises:
        RuntimeError: If container not initialized
    """
    if _container is None:
        raise RuntimeError("Container not initialized")
    return _container


def set_container(container: Optional[Container]) -> None:
    """Set DI container (called from main.py and tests)."""
    global _container
    _container = container
