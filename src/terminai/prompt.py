"""Prompt construction for unrecognized commands."""

from __future__ import annotations

import getpass
import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful shell assistant. Provide safe, accurate suggestions "
    "for mistyped or unknown shell commands."
)

CLOSING_INSTRUCTION = (
    "Keep the answer short. If you suggest a command, prefer the most likely "
    "intended one and never suggest destructive operations."
)


@dataclass(frozen=True)
class PromptContext:
    """Optional facts about the user's session embedded in the prompt."""

    username: str | None = None
    cwd: str | None = None
    similar_commands: list[str] = field(default_factory=list)

    @classmethod
    def capture(cls, similar_commands: list[str] | None = None) -> PromptContext:
        """Read the current login name and working directory.

        Either value is left out when it cannot be determined (no passwd
        entry, deleted working directory, ...).
        """
        try:
            username = getpass.getuser()
        except (KeyError, OSError) as e:
            logger.debug(f"Could not determine username: {e}")
            username = None

        try:
            cwd = os.getcwd()
        except OSError as e:
            logger.debug(f"Could not determine working directory: {e}")
            cwd = None

        return cls(username=username, cwd=cwd, similar_commands=list(similar_commands or []))


def build_prompt(command: str, context: PromptContext | None = None) -> str:
    """Format the user prompt for an unrecognized command.

    The command is embedded verbatim; it is only ever sent as text.
    """
    lines = [
        f"User entered an unrecognized command: '{command}'. "
        "Provide a helpful suggestion or explanation."
    ]

    if context is not None:
        if context.username:
            lines.append(f"User: {context.username}")
        if context.cwd:
            lines.append(f"Working directory: {context.cwd}")
        if context.similar_commands:
            lines.append(f"Similar installed commands: {', '.join(context.similar_commands)}")

    lines.append(CLOSING_INSTRUCTION)
    return "\n".join(lines)


def build_messages(prompt: str) -> list[dict[str, str]]:
    """Wrap a prompt into a chat message list with the assistant role set."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]
