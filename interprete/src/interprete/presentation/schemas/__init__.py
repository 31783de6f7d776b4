"""
Request/Response schemas for Interprete API.
"""

from interprete.presentation.schemas.translation import (
    ErrorResponse,
    LanguageResponse,
    TranslateRequest,
    TranslateResponse,
)

__all__ = [
    "ErrorResponse",
    "LanguageResponse",
    "TranslateRequest",
    "TranslateResponse",
]
