"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from terminai.config import Config
from terminai.config import settings
from terminai.providers import ProviderKind

ENV_VARS = [
    "API_PROVIDER",
    "XAI_API_KEY",
    "OPENROUTER_API_KEY",
    "TERMINAI_MODEL",
    "TERMINAI_TIMEOUT",
    "TERMINAI_CONFIG",
    "OPENROUTER_HTTP_REFERER",
    "OPENROUTER_APP_NAME",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the user's real environment and config file out of tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings, "DEFAULT_CONFIG_PATH", tmp_path / "missing" / "config.toml")


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """A search path directory holding a few fake executables."""
    path = tmp_path / "bin"
    path.mkdir()
    for name in ("git", "ls", "grep"):
        exe = path / name
        exe.write_text("#!/bin/sh\n")
        exe.chmod(0o755)
    # Present but not executable
    (path / "notes.txt").write_text("hello")
    return path


@pytest.fixture
def xai_config() -> Config:
    """Create an xAI configuration with a key."""
    return Config(provider=ProviderKind.XAI, api_key="xai-test-key", timeout=2.0)


@pytest.fixture
def openrouter_config() -> Config:
    """Create an OpenRouter configuration with a key."""
    return Config(provider=ProviderKind.OPENROUTER, api_key="or-test-key", timeout=2.0)


def chat_response(content: str | None = "try `ls -la`", **extra) -> dict:
    """A minimal chat-completions response body."""
    message = {"role": "assistant"}
    if content is not None:
        message["content"] = content
    body = {
        "id": "resp-1",
        "model": "grok-3",
        "choices": [{"index": 0, "message": message, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 42, "completion_tokens": 7},
    }
    body.update(extra)
    return body
