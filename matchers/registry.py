"""
Matcher registry.

Exposes `MATCHER_FACTORIES`: a fixed mapping from a `Matcher` to a factory
building its evaluator, and `MatcherRegistry`, which resolves a matcher name
to an evaluator and caches it so each algorithm is built at most once per
registry instance.

Every evaluator satisfies `NormalizedSimilarity`: `similarity(a, b)` returns a
float in [0.0, 1.0], 1.0 for identical strings, and is symmetric.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable, Dict, Optional, Protocol, Tuple

from .config import ScoringSettings
from .errors import UnsupportedMatcher

logger = logging.getLogger(__name__)


class NormalizedSimilarity(Protocol):
    def similarity(self, a: str, b: str) -> float:
        ...


class Matcher(str, Enum):
    COSINE = "cosine"
    DICE = "dice"
    JACCARD = "jaccard"
    JARO_WINKLER = "jaro-winkler"
    LEVENSHTEIN = "levenshtein"
    LONGEST_COMMON_SUBSEQUENCE = "longest-common-subsequence"

    @classmethod
    def from_name(cls, name: str) -> "Matcher":
        """Look up a matcher by its exact, case-sensitive name."""
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedMatcher(name) from None


# Filled by the matcher modules on import (see matchers/__init__.py)
MATCHER_FACTORIES: Dict[Matcher, Callable[[ScoringSettings], NormalizedSimilarity]] = {}


def normalize(text: str) -> str:
    return str(text).strip().lower()


class MatcherRegistry:
    """Resolve matcher names to cached evaluators and score string pairs.

    The cache is guarded by a lock so one registry may be shared between
    threads. Evaluators are stateless, so the lock only protects the cache
    itself.
    """

    def __init__(self, settings: Optional[ScoringSettings] = None):
        self.settings = settings or ScoringSettings()
        self._cache: Dict[Matcher, NormalizedSimilarity] = {}
        self._lock = threading.Lock()

    @property
    def loaded(self) -> Tuple[Matcher, ...]:
        """Matchers whose evaluator has been built so far."""
        return tuple(self._cache)

    def resolve(self, matcher_name: str) -> NormalizedSimilarity:
        """Return the evaluator for `matcher_name`, building it on first use.

        Raises `UnsupportedMatcher` for any name outside `Matcher`, on every
        call.
        """
        matcher = Matcher.from_name(matcher_name)
        evaluator = self._cache.get(matcher)
        if evaluator is not None:
            return evaluator

        with self._lock:
            evaluator = self._cache.get(matcher)
            if evaluator is None:
                evaluator = MATCHER_FACTORIES[matcher](self.settings)
                self._cache[matcher] = evaluator
                logger.debug("Loaded matcher %s", matcher.value)
        return evaluator

    def score(self, matcher_name: str, left: str, right: str) -> float:
        """Trim and lowercase both strings, then return their similarity in [0, 1]."""
        evaluator = self.resolve(matcher_name)
        return evaluator.similarity(normalize(left), normalize(right))
