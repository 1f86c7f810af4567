import warnings

import pytest

from _lexmunch.matcher import literal, pattern
from _lexmunch.tokenizer.combined import CombinedMatcher, OutcomeKind
from _lexmunch.tokenizer.errors import AmbiguousMatchWarning


def outcome_tuple(outcome):
    return outcome.kind, outcome.value, outcome.end


@pytest.fixture
def combined():
    return CombinedMatcher(pattern("[0-9]+", int), pattern(" +"))


def test_token_match(combined):
    assert outcome_tuple(combined.match("12 34", 0)) == (OutcomeKind.TOKEN, 12, 2)


def test_filler_match(combined):
    outcome = combined.match("12  34", 2)
    assert outcome_tuple(outcome) == (OutcomeKind.FILLER, None, 4)
    assert not outcome.is_token


def test_no_match(combined):
    assert combined.match("12 3a", 4) is None


def test_longer_filler_wins():
    combined = CombinedMatcher(literal("/"), pattern("//[^\n]*"))
    assert combined.match("// comment", 0).kind == OutcomeKind.FILLER
    assert combined.match("/ 2", 0).kind == OutcomeKind.TOKEN


def test_losing_token_value_is_not_built():
    combined = CombinedMatcher(pattern("[0-9]*", int), pattern(" +"))
    outcome = combined.match("12 34", 2)
    assert outcome_tuple(outcome) == (OutcomeKind.FILLER, None, 3)


def test_token_wins_tie_with_warning():
    combined = CombinedMatcher(literal(" ", "SPACE"), pattern(" "))
    with pytest.warns(AmbiguousMatchWarning):
        outcome = combined.match("  ", 0)
    assert outcome_tuple(outcome) == (OutcomeKind.TOKEN, "SPACE", 1)


def test_ambiguity_is_warned_once():
    combined = CombinedMatcher(literal(" ", "SPACE"), pattern(" "))
    with pytest.warns(AmbiguousMatchWarning):
        combined.match("  ", 0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        combined.match("  ", 1)


def test_empty_matches_are_not_ambiguous():
    combined = CombinedMatcher(pattern("[0-9]*"), pattern(" *"))
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        outcome = combined.match("a", 0)
    assert outcome.end == 0


def test_requires_matchers():
    with pytest.raises(TypeError):
        CombinedMatcher("[0-9]+", pattern(" +"))
