"""
Statistics API routes.
"""

from fastapi import APIRouter, Depends

from interprete.di.container import Container
from interprete.presentation.api.dependencies import get_container

router = APIRouter(tags=["stats"])


@router.get("/stats")
def get_stats(container: Container = Depends(get_container)):
    """Operational counters, presence and shutdown state."""
    counters = {k: v for k, v in container.stats.items() if k != "start_time"}
    return {
        "uptime_seconds": round(container.get_uptime_seconds(), 3),
        "active_connections": container.connection_manager.get_total_connections(),
        "online_users": container.presence_registry.count(),
        "translation_provider": container.settings.translation_provider,
        "counters": counters,
        "shutdown": container.shutdown_manager.get_shutdown_info(),
    }
