"""
Data Transfer Objects for Interprete.
"""

from interprete.application.dto.websocket_dto import InboundEvent

__all__ = ["InboundEvent"]
