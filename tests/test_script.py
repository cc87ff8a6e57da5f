import pytest

from matchers import (
    MissingParameter,
    MatcherRegistry,
    SimilarityScriptEngine,
    UnsupportedContext,
    UnsupportedMatcher,
    UnsupportedScript,
    combine_scores,
)
from matchers.script import MISSING_FIELD, document_value


@pytest.fixture
def params():
    return {
        "matchers": [
            {"field": "given_name", "value": "Jane", "matcher": "jaro-winkler", "high": 0.9, "low": 0.1},
            {"field": "city", "value": "Nairobi", "matcher": "levenshtein", "high": 0.8, "low": 0.2},
        ]
    }


@pytest.fixture
def script():
    return SimilarityScriptEngine().compile("string_similarity")


def test_engine_type():
    assert SimilarityScriptEngine.type == "similarity_scripts"


def test_unknown_script_source():
    with pytest.raises(UnsupportedScript) as excinfo:
        SimilarityScriptEngine().compile("other_script")
    assert str(excinfo.value) == "Unknown script name other_script"


def test_unsupported_context():
    with pytest.raises(UnsupportedContext) as excinfo:
        SimilarityScriptEngine().compile("string_similarity", context="aggs")
    assert str(excinfo.value) == "similarity_scripts scripts cannot be used for context [aggs]"


def test_bind_requires_matchers(script):
    with pytest.raises(MissingParameter):
        script.bind({})


def test_execute_scores_each_document(script, params):
    bound = script.bind(params)
    assert bound.needs_score is False

    exact = bound.execute({"given_name": "jane", "city": "NAIROBI"})
    assert exact == pytest.approx(combine_scores(0.9, 0.8))

    unrelated = bound.execute({"given_name": "zzzz", "city": "qqqqqqq"})
    assert unrelated == pytest.approx(combine_scores(0.1, 0.2))


def test_missing_field_uses_placeholder(script, params):
    bound = script.bind(params)
    registry = MatcherRegistry()
    expected = combine_scores(
        min(max(registry.score("jaro-winkler", "Jane", MISSING_FIELD), 0.1), 0.9),
        0.8,
    )
    assert bound.execute({"city": "Nairobi"}) == pytest.approx(expected)


def test_document_value():
    assert document_value({"a": 1}, "a") == 1
    assert document_value({"a": None}, "a") == "null"
    assert document_value({}, "b") == "null"


def test_each_binding_owns_a_registry(script, params):
    first = script.bind(params)
    second = script.bind(params)
    assert first.scorer.registry is not second.scorer.registry
    assert first.specs == second.specs


def test_unknown_matcher_fails_at_execution(script, params):
    params["matchers"][0]["matcher"] = "unknown-matcher"
    bound = script.bind(params)
    with pytest.raises(UnsupportedMatcher):
        bound.execute({"given_name": "jane", "city": "nairobi"})
