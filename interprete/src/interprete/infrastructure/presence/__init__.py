"""Presence tracking."""

from interprete.infrastructure.presence.presence_registry import PresenceRegistry

__all__ = ["PresenceRegistry"]
