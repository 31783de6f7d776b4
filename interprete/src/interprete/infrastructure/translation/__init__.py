"""Translation provider access."""

from interprete.infrastructure.translation.completion_client import (
    ChatCompletionClient,
    CompletionAPIError,
    CompletionConnectionError,
)
from interprete.infrastructure.translation.provider import (
    CompletionProvider,
    resolve_provider,
)

__all__ = [
    "ChatCompletionClient",
    "CompletionAPIError",
    "CompletionConnectionError",
    "CompletionProvider",
    "resolve_provider",
]
