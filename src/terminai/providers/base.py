"""Provider interface and the shared chat-completions request/response handling."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from terminai.errors import ConfigurationError, ProviderResponseError, TransportError
from terminai.prompt import build_messages

from .kinds import ProviderKind

if TYPE_CHECKING:
    from terminai.config import Config

logger = logging.getLogger(__name__)

NO_SUGGESTION = "No suggestion available"


@dataclass(frozen=True)
class SuggestionResponse:
    """A suggestion returned by a provider."""

    suggestion: str
    provider: ProviderKind
    model: str
    input_tokens: int | None = None
    output_tokens: int | None = None
    duration_seconds: float = 0.0


def extract_suggestion(data: Any) -> str:
    """Pull ``choices[0].message.content`` out of a chat-completions body.

    A missing or empty content field degrades to :data:`NO_SUGGESTION`;
    anything structurally wrong above it is an error.

    Raises:
        ProviderResponseError: If there is no first choice with a message.
    """
    if not isinstance(data, dict):
        raise ProviderResponseError("Response body is not a JSON object")

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        raise ProviderResponseError("Response contains no choices")

    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    if not isinstance(message, dict):
        raise ProviderResponseError("First choice has no message")

    content = message.get("content")
    if not isinstance(content, str) or not content.strip():
        return NO_SUGGESTION
    return content


def _usage(data: dict[str, Any]) -> tuple[int | None, int | None]:
    usage = data.get("usage")
    if not isinstance(usage, dict):
        return None, None
    return usage.get("prompt_tokens"), usage.get("completion_tokens")


def _error_detail(response: httpx.Response) -> str:
    """Short human-readable reason from an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error

    text = response.text.strip()
    return text[:200] if text else response.reason_phrase


class ChatProvider(ABC):
    """Base class for OpenAI-style chat-completions providers.

    Subclasses set :attr:`kind` and may add headers; the request, the
    error mapping and the response parsing are shared.
    """

    @property
    @abstractmethod
    def kind(self) -> ProviderKind:
        """Which backend this client talks to."""

    def __init__(self, config: Config, client: httpx.Client | None = None) -> None:
        """Initialize provider.

        Args:
            config: Resolved configuration for this invocation
            client: HTTP client to use (default: a short-lived client per call)
        """
        self.config = config
        self._client = client

    @property
    def endpoint(self) -> str:
        return self.kind.endpoint

    @property
    def name(self) -> str:
        return self.kind.display_name

    def _require_api_key(self) -> str:
        if not self.config.has_api_key:
            raise ConfigurationError(
                f"{self.kind.api_key_env} is not set; an API key is required for {self.name}"
            )
        return self.config.api_key.strip()

    def build_headers(self, api_key: str) -> dict[str, str]:
        """HTTP headers for a request."""
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """JSON request body for a prompt."""
        return {
            "model": self.config.model,
            "messages": build_messages(prompt),
        }

    def _post(self, headers: dict[str, str], payload: dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(
                self.endpoint, headers=headers, json=payload, timeout=self.config.timeout
            )
        with httpx.Client(timeout=self.config.timeout) as client:
            return client.post(self.endpoint, headers=headers, json=payload)

    def suggest(self, prompt: str) -> SuggestionResponse:
        """Send a prompt and return the provider's suggestion.

        Args:
            prompt: The user prompt describing the failed command

        Returns:
            The parsed suggestion with usage metadata

        Raises:
            ConfigurationError: If no API key is configured (no request is made)
            TransportError: On network failures and timeouts
            ProviderResponseError: On non-success statuses or malformed bodies
        """
        api_key = self._require_api_key()
        headers = self.build_headers(api_key)
        payload = self.build_payload(prompt)

        logger.debug(f"POST {self.endpoint} (model={self.config.model})")
        start = time.perf_counter()
        try:
            response = self._post(headers, payload)
        except httpx.TimeoutException as e:
            raise TransportError(
                f"{self.name} request timed out after {self.config.timeout:g}s"
            ) from e
        except httpx.RequestError as e:
            raise TransportError(f"Could not reach {self.name}: {e}") from e
        duration = time.perf_counter() - start

        if not response.is_success:
            raise ProviderResponseError(
                f"{self.name} returned HTTP {response.status_code}: {_error_detail(response)}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderResponseError(f"{self.name} returned a non-JSON response") from e

        suggestion = extract_suggestion(data)
        input_tokens, output_tokens = _usage(data)
        logger.debug(
            f"{self.name} answered in {duration:.2f}s "
            f"(prompt_tokens={input_tokens}, completion_tokens={output_tokens})"
        )
        return SuggestionResponse(
            suggestion=suggestion,
            provider=self.kind,
            model=str(data.get("model") or self.config.model),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            duration_seconds=round(duration, 3),
        )
