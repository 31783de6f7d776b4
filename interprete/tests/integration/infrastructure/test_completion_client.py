"""
Integration tests for ChatCompletionClient.

Runs the real httpx client against an in-process MockTransport to check
the request sent to the provider and the mapping of its responses.

Usage:
    python interprete/tests/integration/infrastructure/test_completion_client.py
    laborant interprete --integration
"""

import json

import httpx
from shared.tests import LaborantTest

from interprete.infrastructure.translation import (
    ChatCompletionClient,
    CompletionAPIError,
    CompletionConnectionError,
    CompletionProvider,
)

PROVIDER = CompletionProvider(
    name="openrouter",
    api_url="https://openrouter.test/api/v1/chat/completions",
    api_key="test-key",
    model="openai/gpt-3.5-turbo",
    extra_headers={"HTTP-Referer": "http://localhost:3000", "X-Title": "Chat"},
)

MESSAGES = [
    {"role": "system", "content": "translate"},
    {"role": "user", "content": "Hello"},
]


def _completion(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class TestCompletionClient(LaborantTest):
    """Integration tests for ChatCompletionClient over httpx."""

    component_name = "interprete"
    test_category = "integration"

    def setup_test(self):
        self.requests = []

    def _client(self, handler) -> ChatCompletionClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        return ChatCompletionClient(
            PROVIDER,
            temperature=0.3,
            max_tokens=500,
            timeout=5.0,
            transport=httpx.MockTransport(recording_handler),
        )

    # ================================================================
    # Request tests
    # ================================================================

    async def test_request_shape(self):
        """Test URL, headers and JSON body sent to the provider."""
        self.reporter.info("Testing completion request", context="Test")

        client = self._client(lambda r: httpx.Response(200, json=_completion("Hola")))
        async with client:
            content = await client.complete(MESSAGES)

        assert content == "Hola"
        request = self.requests[0]
        assert request.method == "POST"
        assert str(request.url) == PROVIDER.api_url
        assert request.headers["Authorization"] == "Bearer test-key"
        assert request.headers["HTTP-Referer"] == "http://localhost:3000"
        assert request.headers["X-Title"] == "Chat"
        assert json.loads(request.content) == {
            "model": "openai/gpt-3.5-turbo",
            "messages": MESSAGES,
            "temperature": 0.3,
            "max_tokens": 500,
        }

    async def test_content_returned_raw(self):
        """Test the client does not clean the provider output."""
        client = self._client(
            lambda r: httpx.Response(200, json=_completion('  "Hola"  '))
        )

        assert await client.complete(MESSAGES) == '  "Hola"  '
        await client.close()

    # ================================================================
    # Error mapping tests
    # ================================================================

    async def test_error_body_message_and_code(self):
        """Test provider error.message and error.code are extracted."""
        self.reporter.info("Testing provider error mapping", context="Test")

        body = {
            "error": {
                "message": "You exceeded your current quota",
                "code": "insufficient_quota",
            }
        }
        client = self._client(lambda r: httpx.Response(429, json=body))

        try:
            await client.complete(MESSAGES)
            assert False, "Should have raised CompletionAPIError"
        except CompletionAPIError as e:
            assert e.status_code == 429
            assert e.message == "You exceeded your current quota"
            assert e.code == "insufficient_quota"
            assert e.is_quota_error is True
        finally:
            await client.close()

    async def test_error_without_body(self):
        """Test errors without a JSON body get a generic message."""
        client = self._client(lambda r: httpx.Response(502, text="Bad gateway"))

        try:
            await client.complete(MESSAGES)
            assert False, "Should have raised CompletionAPIError"
        except CompletionAPIError as e:
            assert e.message == "Request failed with status code 502"
            assert e.is_quota_error is False
        finally:
            await client.close()

    async def test_string_error_body(self):
        """Test a plain string error field is used as the message."""
        client = self._client(
            lambda r: httpx.Response(400, json={"error": "Invalid model"})
        )

        try:
            await client.complete(MESSAGES)
            assert False, "Should have raised CompletionAPIError"
        except CompletionAPIError as e:
            assert e.message == "Invalid model"
        finally:
            await client.close()

    async def test_malformed_success_body(self):
        """Test a 200 without choices is reported as an API error."""
        client = self._client(lambda r: httpx.Response(200, json={"choices": []}))

        try:
            await client.complete(MESSAGES)
            assert False, "Should have raised CompletionAPIError"
        except CompletionAPIError as e:
            assert e.status_code == 200
            assert e.message == "Malformed completion response"
        finally:
            await client.close()

    async def test_non_text_content(self):
        """Test non-string content is rejected."""
        client = self._client(lambda r: httpx.Response(200, json=_completion(None)))

        try:
            await client.complete(MESSAGES)
            assert False, "Should have raised CompletionAPIError"
        except CompletionAPIError as e:
            assert "no text content" in e.message
        finally:
            await client.close()

    async def test_connection_failure(self):
        """Test transport errors become CompletionConnectionError."""
        self.reporter.info("Testing unreachable provider", context="Test")

        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = self._client(refuse)

        try:
            await client.complete(MESSAGES)
            assert False, "Should have raised CompletionConnectionError"
        except CompletionConnectionError as e:
            assert "connection refused" in str(e)
        finally:
            await client.close()

    async def test_timeout(self):
        """Test timeouts become CompletionConnectionError."""

        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = self._client(slow)

        try:
            await client.complete(MESSAGES)
            assert False, "Should have raised CompletionConnectionError"
        except CompletionConnectionError:
            pass
        finally:
            await client.close()

    async def test_close_allows_reuse(self):
        """Test a closed client reopens its HTTP session on next use."""
        client = self._client(lambda r: httpx.Response(200, json=_completion("Hi")))

        await client.complete(MESSAGES)
        await client.close()

        assert await client.complete(MESSAGES) == "Hi"
        await client.close()


if __name__ == "__main__":
    TestCompletionClient.run_as_main()
