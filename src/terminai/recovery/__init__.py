"""Local near-miss hints for mistyped commands."""

from .fuzzy import FuzzyRecovery

__all__ = ["FuzzyRecovery"]
