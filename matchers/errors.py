"""
Scoring errors.

Every failure the scoring engine can report derives from `ScoringError`.
Errors are raised where the problem is detected and propagate unchanged to the
caller; nothing here is retried or replaced with a fallback score.
"""

from __future__ import annotations


class ScoringError(Exception):
    """Base class for all scoring failures."""


class UnsupportedMatcher(ScoringError, ValueError):
    """Raised when a matcher name is not one of the known algorithms."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The matcher [{name}] is not supported.")


class InvalidConfiguration(ScoringError, ValueError):
    """Raised when a field-match entry lacks a required key or holds a bad value."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"Invalid matcher configuration. Missing: [{key}] property.")


class MissingParameter(InvalidConfiguration):
    """Raised when the script parameter map lacks a required entry."""

    def __init__(self, name: str):
        super().__init__(name, f"Missing parameter [{name}]")


class EmptySpecSet(ScoringError, ValueError):
    """Raised when a document is evaluated against zero field-match specs."""

    def __init__(self):
        super().__init__("At least one field-match specification is required to score a document.")


class DegenerateCombination(ScoringError, ArithmeticError):
    """Raised when two scores cannot be fused (0/0 in the naive-Bayes rule)."""

    def __init__(self, left: float, right: float):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot combine scores {left!r} and {right!r}: they are certain and contradictory."
        )


class UnsupportedScript(ScoringError, ValueError):
    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Unknown script name {source}")


class UnsupportedContext(ScoringError, ValueError):
    def __init__(self, engine: str, context: str):
        self.context = context
        super().__init__(f"{engine} scripts cannot be used for context [{context}]")
