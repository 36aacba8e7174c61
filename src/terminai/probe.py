"""Local command resolution against the executable search path."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from terminai.errors import InvalidInvocationError

logger = logging.getLogger(__name__)


def first_token(command: str) -> str:
    """Return the first whitespace-delimited word of a command.

    Raises:
        InvalidInvocationError: If the command is empty or only whitespace.
    """
    parts = command.split(maxsplit=1) if command else []
    if not parts:
        raise InvalidInvocationError("No command provided")
    return parts[0]


class CommandProber:
    """Checks whether a command names an executable visible on the search path."""

    def __init__(self, path: str | None = None) -> None:
        """Initialize prober.

        Args:
            path: Search path to use instead of the process ``PATH``
        """
        self.path = path

    def _search_path(self) -> str:
        if self.path is not None:
            return self.path
        return os.environ.get("PATH", os.defpath)

    def is_resolvable(self, command: str) -> bool:
        """Check whether the command's first word resolves to an executable.

        Lookup failures count as "not resolvable" so the caller falls through
        to the suggestion path instead of crashing.

        Raises:
            InvalidInvocationError: If the command is empty.
        """
        name = first_token(command)
        try:
            found = shutil.which(name, path=self._search_path())
        except (OSError, ValueError) as e:
            logger.debug(f"Lookup of '{name}' failed: {e}")
            return False

        logger.debug(f"Probe '{name}': {found or 'not found'}")
        return found is not None

    def executables(self) -> list[str]:
        """List executable names on the search path, first occurrence wins."""
        seen: set[str] = set()
        names: list[str] = []

        for directory in self._search_path().split(os.pathsep):
            if not directory:
                continue
            try:
                entries = list(Path(directory).iterdir())
            except OSError:
                continue

            for entry in entries:
                if entry.name in seen:
                    continue
                try:
                    if entry.is_file() and os.access(entry, os.X_OK):
                        seen.add(entry.name)
                        names.append(entry.name)
                except OSError:
                    continue

        return names
