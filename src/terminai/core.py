"""Invocation orchestration: probe, then query one provider on failure."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from terminai.config import Config
from terminai.errors import TerminAIError
from terminai.probe import CommandProber, first_token
from terminai.prompt import PromptContext, build_prompt
from terminai.providers import ChatProvider, SuggestionResponse, create_provider
from terminai.recovery import FuzzyRecovery

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class Resolution(Enum):
    """How an invocation ended."""

    VALID = "valid"  # Command resolves locally, no provider call
    SUGGESTED = "suggested"
    FAILED = "failed"


@dataclass
class Outcome:
    """Result of one invocation, ready to be printed."""

    resolution: Resolution
    exit_code: int
    command: str
    stdout: str = ""
    stderr: str = ""
    elapsed_seconds: float = 0.0
    response: SuggestionResponse | None = None


class TerminAI:
    """Main terminai orchestrator."""

    def __init__(
        self,
        config: Config,
        prober: CommandProber | None = None,
        provider: ChatProvider | None = None,
        recovery: FuzzyRecovery | None = None,
    ) -> None:
        self.config = config
        self.prober = prober or CommandProber()
        self.provider = provider or create_provider(config)
        self.recovery = recovery or FuzzyRecovery()

    def _context(self, command: str) -> PromptContext:
        similar: list[str] = []
        if self.config.hints:
            token = first_token(command)
            matches = self.recovery.similar_commands(token, self.prober.executables())
            similar = [name for name, _ in matches]
        return PromptContext.capture(similar_commands=similar)

    def run(self, args: Sequence[str]) -> Outcome:
        """Handle one failed command.

        Args:
            args: The words the user typed, in order

        Returns:
            Outcome with the text to print and the exit status
        """
        start = time.perf_counter()
        command = " ".join(args)

        try:
            logger.debug(f"Probing: {command!r}")
            if self.prober.is_resolvable(command):
                outcome = Outcome(
                    resolution=Resolution.VALID,
                    exit_code=EXIT_OK,
                    command=command,
                    stdout=f"Command '{command}' exists, executing normally.",
                )
            else:
                logger.debug(f"Querying {self.provider.name} for {command!r}")
                prompt = build_prompt(command, self._context(command))
                response = self.provider.suggest(prompt)
                outcome = Outcome(
                    resolution=Resolution.SUGGESTED,
                    exit_code=EXIT_OK,
                    command=command,
                    stdout=response.suggestion,
                    response=response,
                )
        except TerminAIError as e:
            logger.debug(f"Invocation failed: {type(e).__name__}: {e}")
            outcome = Outcome(
                resolution=Resolution.FAILED,
                exit_code=EXIT_FAILURE,
                command=command,
                stderr=f"Error: {e}",
            )

        outcome.elapsed_seconds = time.perf_counter() - start
        return outcome
