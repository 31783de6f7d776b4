"""
Domain exceptions for Interprete.
"""

from interprete.domain.exceptions.message_exceptions import (
    SENDER_MISMATCH,
    SENDER_RECEIVER_REQUIRED,
    USER_ID_REQUIRED,
    InvalidMessageError,
    MessageError,
)
from interprete.domain.exceptions.translation_exceptions import (
    TranslationError,
    TranslationNotConfiguredError,
    TranslationQuotaExceededError,
    TranslationServiceError,
)

__all__ = [
    "MessageError",
    "InvalidMessageError",
    "SENDER_RECEIVER_REQUIRED",
    "USER_ID_REQUIRED",
    "SENDER_MISMATCH",
    "TranslationError",
    "TranslationNotConfiguredError",
    "TranslationQuotaExceededError",
    "TranslationServiceError",
]
