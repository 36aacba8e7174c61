"""OpenRouter provider."""

from __future__ import annotations

from .base import ChatProvider
from .kinds import ProviderKind


class OpenRouterProvider(ChatProvider):
    """Chat completions against ``openrouter.ai``.

    OpenRouter uses the ``HTTP-Referer`` and ``X-Title`` headers to attribute
    requests to an application.
    """

    kind = ProviderKind.OPENROUTER

    def build_headers(self, api_key: str) -> dict[str, str]:
        headers = super().build_headers(api_key)
        headers["HTTP-Referer"] = self.config.openrouter_referer
        headers["X-Title"] = self.config.openrouter_title
        return headers
