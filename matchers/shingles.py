"""
Character shingle similarities: cosine, Sørensen-Dice and Jaccard.

Summary:
- Cuts both strings into overlapping character n-grams ("shingles", 3 by
  default) with scikit-learn's CountVectorizer and compares the two profiles.
- cosine works on shingle counts; dice and jaccard work on shingle sets.

Pros:
- Insensitive to word order and to edits far apart from each other.

Cons:
- Strings shorter than the shingle size have no profile at all.

Score range:
- Returns a float in [0.0, 1.0]. Identical strings -> 1.0; a string without
  shingles compared to a different string -> 0.0.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from sklearn.feature_extraction.text import CountVectorizer
from sklearn.metrics.pairwise import cosine_similarity, pairwise_distances

from .registry import MATCHER_FACTORIES, Matcher


# Same whitespace folding CountVectorizer applies before cutting char n-grams
_WHITE_SPACES = re.compile(r"\s\s+")


class ShingleSimilarity(ABC):
    """Base class: builds the shingle profiles, subclasses compare them."""

    binary = False

    def __init__(self, k: int = 3):
        self.k = k

    def similarity(self, a: str, b: str) -> float:
        a = _WHITE_SPACES.sub(" ", a)
        b = _WHITE_SPACES.sub(" ", b)
        if a == b:
            return 1.0
        if len(a) < self.k or len(b) < self.k:
            return 0.0

        vec = CountVectorizer(
            analyzer="char", ngram_range=(self.k, self.k), lowercase=False, binary=self.binary
        )
        X = vec.fit_transform([a, b])
        return float(max(0.0, min(1.0, self._compare(X))))

    @abstractmethod
    def _compare(self, X) -> float:
        ...


class CosineSimilarity(ShingleSimilarity):
    def _compare(self, X) -> float:
        return cosine_similarity(X[0:1], X[1:2])[0, 0]


class SetSimilarity(ShingleSimilarity):
    """Shingle-set overlap, as 1 - a scipy boolean dissimilarity."""

    binary = True
    # scipy boolean dissimilarity, set by subclasses
    metric: str

    def _compare(self, X) -> float:
        profiles = X.toarray().astype(bool)
        distance = pairwise_distances(profiles[:1], profiles[1:], metric=self.metric)[0, 0]
        return 1.0 - distance


class DiceSimilarity(SetSimilarity):
    metric = "dice"


class JaccardSimilarity(SetSimilarity):
    metric = "jaccard"


# Register in global registry
MATCHER_FACTORIES[Matcher.COSINE] = lambda settings: CosineSimilarity(settings.shingle_size)
MATCHER_FACTORIES[Matcher.DICE] = lambda settings: DiceSimilarity(settings.shingle_size)
MATCHER_FACTORIES[Matcher.JACCARD] = lambda settings: JaccardSimilarity(settings.shingle_size)
