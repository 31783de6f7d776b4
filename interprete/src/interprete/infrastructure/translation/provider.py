"""
Chat-completion provider selection.

OpenRouter is preferred when its key is present; OpenAI is the fallback.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from interprete.config.settings import Settings


@dataclass(frozen=True)
class CompletionProvider:
    """Endpoint, model and credentials of one chat-completion API."""

    name: str
    api_url: str
    api_key: str
    model: str
    extra_headers: Dict[str, str] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return {"openrouter": "OpenRouter", "openai": "OpenAI"}.get(
            self.name, self.name
        )

    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            **self.extra_headers,
        }


def resolve_provider(settings: Settings) -> Optional[CompletionProvider]:
    """
    Pick the provider from configured credentials.

    Returns:
        CompletionProvider, or None when no key is configured
    """
    if settings.openrouter_api_key:
        return CompletionProvider(
            name="openrouter",
            api_url=settings.openrouter_api_url,
            api_key=settings.openrouter_api_key,
            model=settings.openrouter_model,
            extra_headers={
                "HTTP-Referer": settings.openrouter_http_referer,
                "X-Title": settings.openrouter_app_title,
            },
        )
    if settings.openai_api_key:
        return CompletionProvider(
            name="openai",
            api_url=settings.openai_api_url,
            api_key=settings.openai_api_key,
            model=settings.openai_model,
        )
    return None
