"""The closed set of LLM backends terminai can talk to."""

from __future__ import annotations

from enum import Enum

from terminai.errors import ConfigurationError


class ProviderKind(Enum):
    """Supported providers."""

    XAI = "xai"
    OPENROUTER = "openrouter"

    @classmethod
    def parse(cls, value: str | ProviderKind) -> ProviderKind:
        """Resolve a provider name (case-insensitive) to a member.

        Raises:
            ConfigurationError: If the name is not a known provider.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        for kind in cls:
            if kind.value == name:
                return kind
        choices = ", ".join(k.value for k in cls)
        raise ConfigurationError(f"Unknown provider '{value}' (expected one of: {choices})")

    @property
    def endpoint(self) -> str:
        return _ENDPOINTS[self]

    @property
    def api_key_env(self) -> str:
        """Environment variable holding this provider's API key."""
        return _API_KEY_ENV[self]

    @property
    def default_model(self) -> str:
        return _DEFAULT_MODELS[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_ENDPOINTS = {
    ProviderKind.XAI: "https://api.x.ai/v1/chat/completions",
    ProviderKind.OPENROUTER: "https://openrouter.ai/api/v1/chat/completions",
}

_API_KEY_ENV = {
    ProviderKind.XAI: "XAI_API_KEY",
    ProviderKind.OPENROUTER: "OPENROUTER_API_KEY",
}

_DEFAULT_MODELS = {
    ProviderKind.XAI: "grok-3",
    ProviderKind.OPENROUTER: "meta-llama/llama-3.1-8b-instruct",
}

_DISPLAY_NAMES = {
    ProviderKind.XAI: "xAI",
    ProviderKind.OPENROUTER: "OpenRouter",
}
