"""
Edit-based similarities (RapidFuzz): Jaro-Winkler and normalized Levenshtein.

Summary:
- jaro-winkler: `rapidfuzz.distance.JaroWinkler.similarity`, favouring strings
  that share a prefix.
- levenshtein: `rapidfuzz.distance.Levenshtein.normalized_similarity`, i.e.
  1 - edits / max(len(a), len(b)).

Score range:
- Returns a float in [0.0, 1.0]. Identical strings -> 1.0.
"""

from rapidfuzz.distance import JaroWinkler, Levenshtein

from .registry import MATCHER_FACTORIES, Matcher


class JaroWinklerSimilarity:
    def similarity(self, a: str, b: str) -> float:
        return float(JaroWinkler.similarity(a, b))


class LevenshteinSimilarity:
    def similarity(self, a: str, b: str) -> float:
        return float(Levenshtein.normalized_similarity(a, b))


# Register in global registry
MATCHER_FACTORIES[Matcher.JARO_WINKLER] = lambda settings: JaroWinklerSimilarity()
MATCHER_FACTORIES[Matcher.LEVENSHTEIN] = lambda settings: LevenshteinSimilarity()
