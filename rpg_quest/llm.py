"""Chat Service: turns a list of role-tagged messages into generated prose.

The engine is handed a chat callable matching the protocol:

    async def __call__(self, stage: str, messages: list[ChatMessage]) -> str: ...

`stage` identifies which chapter is calling ("chapter_one", "chapter_two",
"chapter_three"). Implementations use it for logging only.

Two implementations are provided:

    HttpChatService  real HTTP client for OpenAI-compatible
                     /chat/completions backends (OpenAI, llama.cpp, LM Studio).
    EchoChatService  returns the last message back. Useful for smoke-testing
                     the chapter flow without a running model.

Tests use StubChat (defined in the test helpers) instead.
"""

from __future__ import annotations

import logging
from typing import Literal, Protocol

import httpx

from rpg_quest.config import ApiConfiguration
from rpg_quest.models import ChatMessage

logger = logging.getLogger(__name__)

EMPTY_REPLY_PLACEHOLDER = "[No response generated]"


# ---------------------------------------------------------------------------
# Protocol: every chat implementation must match this signature
# ---------------------------------------------------------------------------

class ChatService(Protocol):
    async def __call__(self, stage: str, messages: list[ChatMessage]) -> str: ...


# ---------------------------------------------------------------------------
# ChatServiceError: raised for all connection and protocol failures
# ---------------------------------------------------------------------------

FailureKind = Literal["transport", "status", "timeout", "malformed"]


class ChatServiceError(RuntimeError):
    """Raised when the chat backend cannot be reached or returns an error.

    Attributes:
        kind:        "transport", "status", "timeout" or "malformed".
        status_code: HTTP status, or 0 when no response was received.
        body:        Raw response body, kept for diagnostics.
    """

    def __init__(
        self, message: str, kind: FailureKind, status_code: int = 0, body: str = ""
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.body = body


# ---------------------------------------------------------------------------
# HttpChatService: connects to a real backend
# ---------------------------------------------------------------------------

class HttpChatService:
    """Async HTTP client for OpenAI-compatible chat-completion backends.

    Request:   POST {base_url}/chat/completions
               {"model", "messages", "temperature", "max_tokens", "stream"}
    Response:  {"choices": [{"message": {"content": "..."}}]}
               or the older {"choices": [{"text": "..."}]}

    Args:
        base_url:    Base URL including the version, e.g. "http://localhost:8080/v1".
        api_key:     Bearer token, or empty string if not required.
        model:       Model identifier sent with every request.
        temperature: Sampling temperature.
        max_tokens:  Completion length limit.
        stream:      Passed through as the "stream" flag.
        timeout:     HTTP timeout in seconds. Defaults to 60.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        model: str = "gpt-3.5-turbo",
        temperature: float = 0.7,
        max_tokens: int = 800,
        stream: bool = False,
        timeout: float = 60.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._stream = stream
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: ApiConfiguration) -> HttpChatService:
        return cls(
            base_url=config.base_url,
            api_key=config.api_key,
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            stream=config.stream_response,
            timeout=float(config.timeout_seconds),
        )

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def _build_request(self, messages: list[ChatMessage]) -> tuple[str, dict]:
        """Return (url, body) for a chat-completion request."""
        url = f"{self._base_url}/chat/completions"
        body = {
            "model": self._model,
            "messages": [m.model_dump() for m in messages],
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
            "stream": self._stream,
        }
        return url, body

    def _parse_response(self, resp: httpx.Response) -> str:
        """Extract the reply text from the response body."""
        try:
            data = resp.json()
        except ValueError as e:
            raise ChatServiceError(
                "Chat backend returned a body that is not JSON",
                kind="malformed", status_code=resp.status_code, body=resp.text,
            ) from e

        malformed = ChatServiceError(
            "Unexpected response format from chat backend",
            kind="malformed", status_code=resp.status_code, body=resp.text,
        )

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            raise malformed

        choice = choices[0]
        message = choice.get("message")
        if isinstance(message, dict) and "content" in message:
            text = message["content"] or ""
        elif "text" in choice:
            text = choice["text"] or ""
        else:
            raise malformed
        if not isinstance(text, str):
            raise malformed

        if not text:
            logger.warning("chat backend returned an empty reply: %s", resp.text)
            return EMPTY_REPLY_PLACEHOLDER
        return text

    async def __call__(self, stage: str, messages: list[ChatMessage]) -> str:
        url, body = self._build_request(messages)
        logger.debug("chat call stage=%s url=%s messages=%d", stage, url, len(messages))

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(url, json=body, headers=self._headers())
                resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise ChatServiceError(
                f"Chat backend timed out after {self._timeout}s", kind="timeout"
            ) from e
        except httpx.HTTPStatusError as e:
            raise ChatServiceError(
                f"Chat backend returned HTTP {e.response.status_code}",
                kind="status",
                status_code=e.response.status_code,
                body=e.response.text,
            ) from e
        except httpx.TransportError as e:
            raise ChatServiceError(
                f"Cannot connect to chat backend at {self._base_url}", kind="transport"
            ) from e

        text = self._parse_response(resp)
        logger.debug("chat response stage=%s len=%d", stage, len(text))
        return text


# ---------------------------------------------------------------------------
# EchoChatService: returns the last message; useful for flow smoke tests
# ---------------------------------------------------------------------------

class EchoChatService:
    """Returns the content of the last message as-is. No network calls.

    Lets you walk all three chapters end-to-end without a running model.
    """

    async def __call__(self, stage: str, messages: list[ChatMessage]) -> str:
        logger.debug("EchoChatService stage=%s messages=%d", stage, len(messages))
        if not messages:
            return EMPTY_REPLY_PLACEHOLDER
        return messages[-1].content
