"""xAI (Grok) provider."""

from __future__ import annotations

from .base import ChatProvider
from .kinds import ProviderKind


class XAIProvider(ChatProvider):
    """Chat completions against ``api.x.ai``."""

    kind = ProviderKind.XAI
