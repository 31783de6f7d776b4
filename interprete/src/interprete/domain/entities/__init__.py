"""
Domain entities for Interprete.
"""

from interprete.domain.entities.connection import Connection, ConnectionState

__all__ = ["Connection", "ConnectionState"]
