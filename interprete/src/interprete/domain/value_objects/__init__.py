"""
Value objects for Interprete domain.
"""

from interprete.domain.value_objects.language import (
    SUPPORTED_LANGUAGES,
    Language,
    find_language,
    language_name,
    languages_payload,
)
from interprete.domain.value_objects.private_message import (
    MESSAGE_FIELDS,
    PrivateMessage,
    ResolvedMessage,
    format_timestamp,
    generate_message_id,
)
from interprete.domain.value_objects.user_id import UserId

__all__ = [
    "Language",
    "SUPPORTED_LANGUAGES",
    "find_language",
    "language_name",
    "languages_payload",
    "MESSAGE_FIELDS",
    "PrivateMessage",
    "ResolvedMessage",
    "format_timestamp",
    "generate_message_id",
    "UserId",
]
