"""
Application use cases for Interprete.
"""

from interprete.application.use_cases.authenticate_user import (
    AuthenticateUserUseCase,
)
from interprete.application.use_cases.disconnect_user import DisconnectUserUseCase
from interprete.application.use_cases.route_private_message import (
    MESSAGE_SENT_EVENT,
    PRIVATE_MESSAGE_EVENT,
    RoutePrivateMessageUseCase,
    RouteResult,
    RouteStatus,
)
from interprete.application.use_cases.translate_text import (
    TranslateTextUseCase,
    build_messages,
    clean_translation,
)
from interprete.application.use_cases.validate_frame import (
    FrameValidationResult,
    ValidateFrameUseCase,
)

__all__ = [
    "AuthenticateUserUseCase",
    "DisconnectUserUseCase",
    "RoutePrivateMessageUseCase",
    "RouteResult",
    "RouteStatus",
    "PRIVATE_MESSAGE_EVENT",
    "MESSAGE_SENT_EVENT",
    "TranslateTextUseCase",
    "build_messages",
    "clean_translation",
    "ValidateFrameUseCase",
    "FrameValidationResult",
]
