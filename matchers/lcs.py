"""
Longest common subsequence similarity.

RapidFuzz exposes the LCS measure as a distance,
`LCSseq.distance(a, b) == max(len(a), len(b)) - lcs(a, b)`. This module turns
it into a similarity: 1 - distance / max(len(a), len(b)).

Score range:
- Returns a float in [0.0, 1.0]. Two empty strings are identical -> 1.0.
"""

from rapidfuzz.distance import LCSseq

from .registry import MATCHER_FACTORIES, Matcher


class LongestCommonSubsequenceSimilarity:
    def similarity(self, a: str, b: str) -> float:
        longest = max(len(a), len(b))
        if longest == 0:
            return 1.0
        return 1.0 - LCSseq.distance(a, b) / longest


# Register in global registry
MATCHER_FACTORIES[Matcher.LONGEST_COMMON_SUBSEQUENCE] = (
    lambda settings: LongestCommonSubsequenceSimilarity()
)
