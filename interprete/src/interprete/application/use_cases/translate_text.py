"""
Use case for translating a piece of text through a chat-completion API.
"""

import re
from typing import Dict, List, Optional

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji

from interprete.domain.exceptions import (
    TranslationQuotaExceededError,
    TranslationServiceError,
)
from interprete.domain.exceptions.translation_exceptions import (
    CONNECTION_FAILED_MESSAGE,
)
from interprete.domain.value_objects import language_name
from interprete.infrastructure.translation import (
    ChatCompletionClient,
    CompletionAPIError,
    CompletionConnectionError,
)

AUTO_DETECT = "auto"

SYSTEM_PROMPT = (
    "You are a professional translator. Your task is to translate the entire "
    "text accurately from {source} to {target}. Translate the complete message "
    "maintaining the meaning, tone, and context. Return ONLY the translated "
    "text in {target}, nothing else - no explanations, no additional text, "
    "just the translation."
)
USER_PROMPT = 'Translate this text to {target}: "{text}"'

_SURROUNDING_QUOTE = re.compile(r"^[\"']|[\"']$")


def clean_translation(content: str) -> str:
    """Trim whitespace and one wrapping quote character at either end."""
    return _SURROUNDING_QUOTE.sub("", content.strip())


def build_messages(
    text: str, target_language: str, source_language: str = AUTO_DETECT
) -> List[Dict[str, str]]:
    """Chat messages asking the model for a bare translation."""
    target = language_name(target_language)
    source = (
        "the source language"
        if source_language == AUTO_DETECT
        else language_name(source_language)
    )
    return [
        {
            "role": "system",
            "content": SYSTEM_PROMPT.format(source=source, target=target),
        },
        {"role": "user", "content": USER_PROMPT.format(target=target, text=text)},
    ]


class TranslateTextUseCase:
    """
    Translate text, degrading to the original text when translation is
    unavailable.

    - No provider configured: original text, no error.
    - Provider reports quota/billing exhaustion: original text, warning.
    - Any other provider or network failure: TranslationServiceError.
    """

    def __init__(
        self,
        completion_client: Optional[ChatCompletionClient] = None,
        reporter: Optional[SystemReporter] = None,
    ):
        self.completion_client = completion_client
        self.reporter = reporter

    @property
    def is_configured(self) -> bool:
        return self.completion_client is not None

    async def execute(
        self,
        text: str,
        target_language: str,
        source_language: str = AUTO_DETECT,
    ) -> str:
        """
        Translate text into target_language.

        Args:
            text: Text to translate
            target_language: Target language code (e.g. "es")
            source_language: Source language code, or "auto"

        Returns:
            Translated text, or the original text on the fallback paths

        Raises:
            TranslationServiceError: Provider error or provider unreachable
        """
        if self.completion_client is None:
            if self.reporter:
                self.reporter.info(
                    "No translation API key found. Returning original text.",
                    context="Translate",
                    verbose_level=2,
                )
            return text

        if self.reporter:
            self.reporter.debug(
                f"{Emoji.MESSAGE.TRANSLATE} {source_language} -> "
                f"{target_language} ({len(text)} chars)",
                context="Translate",
            )

        messages = build_messages(text, target_language, source_language)
        try:
            content = await self._request(messages)
        except TranslationQuotaExceededError as e:
            if self.reporter:
                self.reporter.warning(
                    f"{Emoji.MESSAGE.QUOTA} API quota exceeded. Returning "
                    f"original text. Please check your billing. ({e.detail})",
                    context="Translate",
                    verbose_level=1,
                )
            return text

        return clean_translation(content)

    async def _request(self, messages: List[Dict[str, str]]) -> str:
        """Call the provider and map its failures to domain errors."""
        try:
            return await self.completion_client.complete(messages)
        except CompletionAPIError as e:
            if e.is_quota_error:
                raise TranslationQuotaExceededError(e.message) from e
            if self.reporter:
                self.reporter.error(
                    f"{Emoji.ERROR.ERROR} Translation API error "
                    f"({e.status_code}): {e.message}",
                    context="Translate",
                )
            raise TranslationServiceError(e.message, status_code=e.status_code) from e
        except CompletionConnectionError as e:
            if self.reporter:
                self.reporter.error(
                    f"{Emoji.NETWORK.TIMEOUT} Translation API unreachable: {e}",
                    context="Translate",
                )
            raise TranslationServiceError(CONNECTION_FAILED_MESSAGE) from e
