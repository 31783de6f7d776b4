"""
HTTP client for OpenAI-compatible chat-completion endpoints.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from interprete.infrastructure.translation.provider import CompletionProvider

logger = logging.getLogger(__name__)

QUOTA_ERROR_CODE = "insufficient_quota"


class CompletionAPIError(Exception):
    """Raised when the provider answers with an error or unusable body."""

    def __init__(
        self, status_code: int, message: str, code: Optional[Any] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code

    @property
    def is_quota_error(self) -> bool:
        """Quota or billing exhaustion reported by the provider."""
        if self.code == QUOTA_ERROR_CODE:
            return True
        text = self.message.lower()
        return "quota" in text or "billing" in text

    @classmethod
    def from_response(cls, response: httpx.Response) -> "CompletionAPIError":
        """Extract error.message / error.code from an error response."""
        message = f"Request failed with status code {response.status_code}"
        code = None
        try:
            body = response.json()
        except ValueError:
            body = None

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            message = str(error.get("message") or message)
            code = error.get("code")
        elif isinstance(error, str) and error:
            message = error

        return cls(response.status_code, message, code)


class CompletionConnectionError(Exception):
    """Raised when the provider cannot be reached."""

    pass


class ChatCompletionClient:
    """
    Async chat-completion client.

    One request per call, no retries. The httpx timeout is the only
    time limit.

    Attributes:
        provider: Endpoint, model and credentials
        temperature: Sampling temperature
        max_tokens: Completion length cap
        timeout: HTTP timeout in seconds
    """

    def __init__(
        self,
        provider: CompletionProvider,
        temperature: float = 0.3,
        max_tokens: int = 500,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client.

        Args:
            provider: Provider to call
            temperature: Sampling temperature
            max_tokens: Maximum completion tokens
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.provider = provider
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.debug(
            f"ChatCompletionClient initialized: {provider.name} "
            f"({provider.model})"
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            )
        return self._client

    async def complete(self, messages: List[Dict[str, str]]) -> str:
        """
        Request a completion and return the first choice's content.

        Args:
            messages: Chat messages ({"role": ..., "content": ...})

        Returns:
            Raw content of the first choice

        Raises:
            CompletionAPIError: Provider returned an error or bad body
            CompletionConnectionError: Provider unreachable or timed out
        """
        payload = {
            "model": self.provider.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        try:
            response = await self.client.post(
                self.provider.api_url,
                json=payload,
                headers=self.provider.headers(),
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Completion request timed out after {self.timeout}s")
            raise CompletionConnectionError(str(e) or "timeout") from e
        except httpx.RequestError as e:
            logger.error(f"Failed to reach {self.provider.api_url}: {e}")
            raise CompletionConnectionError(str(e)) from e

        if response.is_error:
            raise CompletionAPIError.from_response(response)

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise CompletionAPIError(
                response.status_code, "Malformed completion response"
            ) from e

        if not isinstance(content, str):
            raise CompletionAPIError(
                response.status_code, "Completion response has no text content"
            )
        return content

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "ChatCompletionClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
