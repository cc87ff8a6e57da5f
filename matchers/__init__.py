"""
Fuzzy field-match scoring package.

Exposes `MatcherRegistry` and `FieldScorer` and imports the matcher modules
for side-effect registration into `MATCHER_FACTORIES`.
"""

from .registry import MATCHER_FACTORIES, Matcher, MatcherRegistry, NormalizedSimilarity  # noqa: F401

# Import modules that register themselves in the registry on import.
from . import shingles  # noqa: F401  # side-effect: registers 'cosine', 'dice', 'jaccard'
from . import edit  # noqa: F401  # side-effect: registers 'jaro-winkler', 'levenshtein'
from . import lcs  # noqa: F401  # side-effect: registers 'longest-common-subsequence'

from .config import ScoringSettings  # noqa: F401
from .errors import (  # noqa: F401
    DegenerateCombination,
    EmptySpecSet,
    InvalidConfiguration,
    MissingParameter,
    ScoringError,
    UnsupportedContext,
    UnsupportedMatcher,
    UnsupportedScript,
)
from .scorer import FieldScore, FieldScorer, combine_scores  # noqa: F401
from .script import SimilarityScriptEngine  # noqa: F401
from .spec import FieldMatchSpec, parse_field_spec, parse_field_specs  # noqa: F401

__version__ = "0.1.0"
