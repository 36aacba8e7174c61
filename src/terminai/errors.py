"""Error types raised while turning a failed command into a suggestion."""

from __future__ import annotations


class TerminAIError(Exception):
    """Base class for all terminai errors."""


class InvalidInvocationError(TerminAIError):
    """No command was supplied."""


class ConfigurationError(TerminAIError):
    """A provider selection, credential or setting is missing or invalid."""


class TransportError(TerminAIError):
    """The provider could not be reached (network failure or timeout)."""


class ProviderResponseError(TerminAIError):
    """The provider answered, but not with a usable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
