from concurrent.futures import ThreadPoolExecutor

import pytest

from matchers import Matcher, MatcherRegistry, UnsupportedMatcher

ALL_MATCHERS = [m.value for m in Matcher]


@pytest.fixture
def registry():
    return MatcherRegistry()


def test_six_matchers_known():
    assert ALL_MATCHERS == [
        "cosine",
        "dice",
        "jaccard",
        "jaro-winkler",
        "levenshtein",
        "longest-common-subsequence",
    ]


@pytest.mark.parametrize("name", ALL_MATCHERS)
@pytest.mark.parametrize("text", ["a", "hello", "Hello World", "acero inoxidable 1/2"])
def test_identical_strings_score_one(registry, name, text):
    assert registry.score(name, text, text) == 1.0


@pytest.mark.parametrize("name", ALL_MATCHERS)
def test_normalization_trims_and_lowercases(registry, name):
    assert registry.score(name, " Hello ", "hello") == 1.0
    assert registry.score(name, "HELLO WORLD", "\thello world\n") == 1.0


@pytest.mark.parametrize("name", ALL_MATCHERS)
@pytest.mark.parametrize(
    "a, b",
    [
        ("martha", "marhta"),
        ("kitten", "sitting"),
        ("Jane Doe", "John Doe"),
        ("nairobi", "nakuru"),
        ("ab", "abcdef"),
    ],
)
def test_symmetric_and_in_range(registry, name, a, b):
    forward = registry.score(name, a, b)
    backward = registry.score(name, b, a)
    assert forward == pytest.approx(backward)
    assert 0.0 <= forward <= 1.0


@pytest.mark.parametrize("name", ["unknown-matcher", "Cosine", "LEVENSHTEIN", "jaro_winkler", ""])
def test_unknown_matcher_always_raises(registry, name):
    for _ in range(3):
        with pytest.raises(UnsupportedMatcher) as excinfo:
            registry.score(name, "a", "b")
        assert excinfo.value.name == name
        assert f"[{name}]" in str(excinfo.value)
    assert registry.loaded == ()


def test_unknown_matcher_is_a_value_error(registry):
    with pytest.raises(ValueError):
        registry.resolve("unknown-matcher")


def test_evaluators_built_once(registry):
    assert registry.loaded == ()
    first = registry.resolve("jaccard")
    assert registry.resolve("jaccard") is first
    assert registry.loaded == (Matcher.JACCARD,)


def test_cache_is_per_instance():
    assert MatcherRegistry().resolve("cosine") is not MatcherRegistry().resolve("cosine")


def test_repeated_scores_are_stable(registry):
    results = {registry.score("jaro-winkler", "Dixon", "Dicksonx") for _ in range(5)}
    assert len(results) == 1


def test_shared_registry_across_threads(registry):
    with ThreadPoolExecutor(max_workers=8) as pool:
        evaluators = list(pool.map(lambda _: registry.resolve("levenshtein"), range(64)))
    assert all(e is evaluators[0] for e in evaluators)
    assert registry.loaded == (Matcher.LEVENSHTEIN,)


def test_lowercasing_is_not_case_folding(registry):
    assert registry.score("levenshtein", "STRASSE", "strasse") == 1.0
    assert registry.score("levenshtein", "Straße", "STRASSE") < 1.0
    assert registry.score("levenshtein", "Straße", "STRAßE") == 1.0
