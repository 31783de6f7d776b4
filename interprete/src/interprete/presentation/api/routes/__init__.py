"""
API routes for Interprete.
"""

from interprete.presentation.api.routes.health import router as health_router
from interprete.presentation.api.routes.stats import router as stats_router
from interprete.presentation.api.routes.translation import (
    router as translation_router,
)
from interprete.presentation.api.routes.websocket import router as websocket_router

__all__ = ["health_router", "stats_router", "translation_router", "websocket_router"]
