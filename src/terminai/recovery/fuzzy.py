"""Fuzzy matching of mistyped command names against installed executables."""

from __future__ import annotations

import logging

from thefuzz import fuzz, process

logger = logging.getLogger(__name__)


class FuzzyRecovery:
    """Finds installed commands that look like a mistyped one."""

    def __init__(self, threshold: int = 60, limit: int = 3) -> None:
        """Initialize fuzzy recovery.

        Args:
            threshold: Minimum similarity score (0-100) for matches
            limit: Maximum number of matches returned
        """
        self.threshold = threshold
        self.limit = limit

    def similar_commands(
        self,
        token: str,
        candidates: list[str],
    ) -> list[tuple[str, int]]:
        """Rank candidates by similarity to a command name.

        Args:
            token: The unresolved command name (e.g. ``gti``)
            candidates: Executable names to match against

        Returns:
            List of (command, score) tuples, best first
        """
        # Skip the token itself and names that cannot be near misses
        pool = sorted({
            c for c in candidates
            if c != token and abs(len(c) - len(token)) <= max(2, len(token) // 2)
        })
        if not token or not pool:
            return []

        # Rank everything, then cut; ties are broken by name
        matches = process.extract(
            token,
            pool,
            scorer=fuzz.ratio,
            limit=len(pool),
        )
        results = [(m[0], int(m[1])) for m in matches if m[1] >= self.threshold]
        results.sort(key=lambda m: (-m[1], m[0]))
        logger.debug(f"Similar to '{token}': {results[:self.limit]}")
        return results[:self.limit]
