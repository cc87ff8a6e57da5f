"""
Search-engine script integration.

The host compiles the ``string_similarity`` script of the
``similarity_scripts`` engine once, binds it to a query's parameters once, and
then executes the bound script for every candidate document::

    script = SimilarityScriptEngine().compile("string_similarity")
    bound = script.bind({"matchers": [...]})
    score = bound.execute(document_source)
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple

from .config import ScoringSettings
from .errors import UnsupportedContext, UnsupportedScript
from .registry import MatcherRegistry
from .scorer import FieldScorer
from .spec import FieldMatchSpec, parse_field_specs

logger = logging.getLogger(__name__)

ENGINE_TYPE = "similarity_scripts"
SCRIPT_SOURCE = "string_similarity"
SCORE_CONTEXT = "score"

# Text used in place of a field the document does not have
MISSING_FIELD = "null"


def document_value(document: Mapping[str, Any], field_name: str) -> Any:
    value = document.get(field_name)
    return MISSING_FIELD if value is None else value


class BoundSimilarityScript:
    """A script bound to one query: parsed specs plus a registry of its own."""

    needs_score = False

    def __init__(self, specs: Tuple[FieldMatchSpec, ...], scorer: FieldScorer):
        self.specs = specs
        self.scorer = scorer

    def execute(self, document: Mapping[str, Any]) -> float:
        return self.scorer.evaluate(self.specs, lambda name: document_value(document, name))


class SimilarityScript:
    def __init__(self, settings: Optional[ScoringSettings] = None):
        self.settings = settings or ScoringSettings()

    def bind(self, params: Mapping[str, Any]) -> BoundSimilarityScript:
        specs = parse_field_specs(params)
        return BoundSimilarityScript(specs, FieldScorer(MatcherRegistry(self.settings)))


class SimilarityScriptEngine:
    type = ENGINE_TYPE
    supported_contexts = frozenset({SCORE_CONTEXT})

    def __init__(self, settings: Optional[ScoringSettings] = None):
        self.settings = settings or ScoringSettings()

    def compile(self, source: str, context: str = SCORE_CONTEXT) -> SimilarityScript:
        if context not in self.supported_contexts:
            raise UnsupportedContext(self.type, context)
        if source != SCRIPT_SOURCE:
            raise UnsupportedScript(source)
        logger.debug("Compiled %s script %s", self.type, source)
        return SimilarityScript(self.settings)
