"""LLM provider clients."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import NO_SUGGESTION, ChatProvider, SuggestionResponse, extract_suggestion
from .kinds import ProviderKind
from .openrouter import OpenRouterProvider
from .xai import XAIProvider

if TYPE_CHECKING:
    import httpx

    from terminai.config import Config

PROVIDERS: dict[ProviderKind, type[ChatProvider]] = {
    ProviderKind.XAI: XAIProvider,
    ProviderKind.OPENROUTER: OpenRouterProvider,
}


def create_provider(config: Config, client: httpx.Client | None = None) -> ChatProvider:
    """Instantiate the provider selected by the configuration."""
    return PROVIDERS[config.provider](config, client=client)


__all__ = [
    "ChatProvider",
    "OpenRouterProvider",
    "PROVIDERS",
    "ProviderKind",
    "SuggestionResponse",
    "XAIProvider",
    "NO_SUGGESTION",
    "create_provider",
    "extract_suggestion",
]
