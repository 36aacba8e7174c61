"""Resolved runtime configuration.

Configuration is read once at startup from (lowest to highest priority)
built-in defaults, a TOML file, environment variables and command-line
overrides. The resulting :class:`Config` is immutable and is passed
explicitly to everything that needs it.

Example ``~/.config/terminai/config.toml``::

    provider = "openrouter"
    api_key = "sk-or-..."
    model = "meta-llama/llama-3.1-8b-instruct"
    timeout = 8

    [xai]
    api_key = "xai-..."
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from terminai.errors import ConfigurationError
from terminai.providers.kinds import ProviderKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "terminai" / "config.toml"
DEFAULT_TIMEOUT = 10.0
DEFAULT_PROVIDER = ProviderKind.XAI
DEFAULT_OPENROUTER_REFERER = "https://localhost"
DEFAULT_OPENROUTER_TITLE = "terminai"

ENV_PROVIDER = "API_PROVIDER"
ENV_MODEL = "TERMINAI_MODEL"
ENV_TIMEOUT = "TERMINAI_TIMEOUT"
ENV_CONFIG = "TERMINAI_CONFIG"
ENV_OPENROUTER_REFERER = "OPENROUTER_HTTP_REFERER"
ENV_OPENROUTER_TITLE = "OPENROUTER_APP_NAME"


@dataclass(frozen=True)
class Config:
    """Everything one invocation needs to know about its provider."""

    provider: ProviderKind = DEFAULT_PROVIDER
    api_key: str | None = field(default=None, repr=False)
    model: str = ""
    timeout: float = DEFAULT_TIMEOUT
    hints: bool = True
    openrouter_referer: str = DEFAULT_OPENROUTER_REFERER
    openrouter_title: str = DEFAULT_OPENROUTER_TITLE

    def __post_init__(self) -> None:
        if not self.model:
            object.__setattr__(self, "model", self.provider.default_model)

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse a TOML config file.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    logger.debug(f"Loaded config file: {path}")
    return data


def _locate_config_file(path: str | Path | None, env: Mapping[str, str]) -> Path | None:
    """Pick the config file to read; explicit locations must exist."""
    explicit = path or env.get(ENV_CONFIG)
    if explicit:
        explicit_path = Path(explicit).expanduser()
        if not explicit_path.is_file():
            raise ConfigurationError(f"Config file not found: {explicit_path}")
        return explicit_path

    if DEFAULT_CONFIG_PATH.is_file():
        return DEFAULT_CONFIG_PATH
    return None


def _parse_timeout(value: Any, source: str) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid timeout from {source}: {value!r}") from e
    if timeout <= 0:
        raise ConfigurationError(f"Timeout from {source} must be positive, got {timeout}")
    return timeout


def _first(*values: Any) -> Any:
    """Return the first value that is neither None nor an empty string."""
    for value in values:
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def load_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Build the configuration for this invocation.

    Args:
        path: Explicit config file (default: ``$TERMINAI_CONFIG`` or
            ``~/.config/terminai/config.toml`` when present)
        env: Environment mapping (default: ``os.environ``)
        overrides: Command-line values; ``None`` entries are ignored

    Returns:
        The resolved, immutable configuration. A missing API key is not an
        error here; it is reported when a provider is actually needed.

    Raises:
        ConfigurationError: On unreadable files, unknown providers or bad
            numeric values.
    """
    env = os.environ if env is None else env
    overrides = overrides or {}

    config_file = _locate_config_file(path, env)
    data = read_config_file(config_file) if config_file else {}

    file_provider = ProviderKind.parse(data["provider"]) if _first(data.get("provider")) else None
    provider = ProviderKind.parse(
        _first(overrides.get("provider"), env.get(ENV_PROVIDER), file_provider) or DEFAULT_PROVIDER
    )

    # Top-level api_key/model in the file belong to the file's own provider.
    section = data.get(provider.value, {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config section [{provider.value}] must be a table")
    top_level_applies = (file_provider or DEFAULT_PROVIDER) is provider

    api_key = _first(
        env.get(provider.api_key_env),
        section.get("api_key"),
        data.get("api_key") if top_level_applies else None,
    )
    model = _first(
        overrides.get("model"),
        env.get(ENV_MODEL),
        section.get("model"),
        data.get("model") if top_level_applies else None,
    )

    timeout = DEFAULT_TIMEOUT
    for source, value in (
        ("config file", data.get("timeout")),
        (ENV_TIMEOUT, env.get(ENV_TIMEOUT)),
        ("command line", overrides.get("timeout")),
    ):
        if _first(value) is not None:
            timeout = _parse_timeout(value, source)

    hints = data.get("hints", True)
    if overrides.get("hints") is not None:
        hints = overrides["hints"]
    if not isinstance(hints, bool):
        raise ConfigurationError(f"'hints' must be true or false, got {hints!r}")

    config = Config(
        provider=provider,
        api_key=str(api_key) if api_key is not None else None,
        model=str(model) if model else provider.default_model,
        timeout=timeout,
        hints=hints,
        openrouter_referer=_first(
            env.get(ENV_OPENROUTER_REFERER), data.get("openrouter_referer")
        ) or DEFAULT_OPENROUTER_REFERER,
        openrouter_title=_first(
            env.get(ENV_OPENROUTER_TITLE), data.get("openrouter_title")
        ) or DEFAULT_OPENROUTER_TITLE,
    )
    logger.debug(
        f"Using provider={config.provider.value} model={config.model} "
        f"timeout={config.timeout}s api_key={'set' if config.has_api_key else 'missing'}"
    )
    return config
