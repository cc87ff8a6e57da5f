"""
Field scoring and score fusion.

`FieldScorer` compares each field named by a list of `FieldMatchSpec` with its
reference value, clamps the similarity to the spec's bounds and fuses all
field scores into one document score with `combine_scores`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .config import ScoringSettings
from .errors import DegenerateCombination, EmptySpecSet
from .registry import MatcherRegistry
from .spec import FieldMatchSpec

logger = logging.getLogger(__name__)

FieldValueAccessor = Callable[[str], Any]


@dataclass(frozen=True)
class FieldScore:
    field_name: str
    matcher_name: str
    raw: float
    score: float


def combine_scores(p: float, q: float) -> float:
    """Combine two probabilities using Bayes' theorem ("naive Bayes").

    Agreeing scores reinforce each other: combine(0.9, 0.9) ~= 0.988.
    Conflicting ones cancel out: combine(0.9, 0.1) == 0.5.

    Raises `DegenerateCombination` when the scores are certain and
    contradictory (0 and 1), where the rule is 0/0.
    """
    agree = p * q
    denominator = agree + (1.0 - p) * (1.0 - q)
    if denominator == 0.0:
        raise DegenerateCombination(p, q)
    return agree / denominator


class FieldScorer:
    def __init__(
        self,
        registry: Optional[MatcherRegistry] = None,
        settings: Optional[ScoringSettings] = None,
    ):
        if settings is None:
            settings = registry.settings if registry is not None else ScoringSettings()
        self.settings = settings
        self.registry = registry or MatcherRegistry(settings)

    def explain(
        self, specs: Sequence[FieldMatchSpec], field_value: FieldValueAccessor
    ) -> List[FieldScore]:
        """Raw and clamped score of every field, in spec order."""
        breakdown = []
        for spec in specs:
            value = str(field_value(spec.field_name))
            raw = self.registry.score(spec.matcher_name, spec.reference_value, value)
            breakdown.append(FieldScore(spec.field_name, spec.matcher_name, raw, spec.clamp(raw)))
        return breakdown

    def evaluate(self, specs: Sequence[FieldMatchSpec], field_value: FieldValueAccessor) -> float:
        """Score one document.

        Args:
            specs: Field-match specs of the query, at least one
            field_value: Returns the document's value for a field name

        Returns:
            The fused score of all fields
        """
        if not specs:
            raise EmptySpecSet()
        return self.fuse(field.score for field in self.explain(specs, field_value))

    def fuse(self, scores: Iterable[float]) -> float:
        total: Optional[float] = None
        for score in scores:
            total = score if total is None else self._combine(total, score)
        if total is None:
            raise EmptySpecSet()
        return total

    def _combine(self, p: float, q: float) -> float:
        try:
            return combine_scores(p, q)
        except DegenerateCombination:
            if self.settings.degenerate_policy == "raise":
                raise
            logger.debug("Contradictory scores %s and %s, using neutral score", p, q)
            return self.settings.neutral_score
