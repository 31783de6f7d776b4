"""
Translation-related exceptions.
"""

NOT_CONFIGURED_MESSAGE = (
    "Translation service not configured. Please set OPENROUTER_API_KEY "
    "or OPENAI_API_KEY in server/.env file."
)
CONNECTION_FAILED_MESSAGE = (
    "Cannot connect to translation API. Check your internet connection."
)


class TranslationError(Exception):
    """Base exception for translation errors."""

    pass


class TranslationNotConfiguredError(TranslationError):
    """Raised when no completion provider credential is configured."""

    def __init__(self):
        super().__init__(NOT_CONFIGURED_MESSAGE)


class TranslationServiceError(TranslationError):
    """Raised when the completion provider fails or is unreachable."""

    def __init__(self, detail: str, status_code: int = None):
        """
        Initialize TranslationServiceError.

        Args:
            detail: Provider error message (or connection failure text)
            status_code: Provider HTTP status, if a response was received
        """
        super().__init__(f"Translation failed: {detail}")
        self.detail = detail
        self.status_code = status_code


class TranslationQuotaExceededError(TranslationError):
    """
    Raised when the provider reports exhausted quota or billing.

    The gateway recovers from this by returning the untranslated text.
    """

    def __init__(self, detail: str):
        super().__init__(f"Translation quota exceeded: {detail}")
        self.detail = detail
