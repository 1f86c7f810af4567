import pytest
import regex

from _lexmunch.matcher import (
    Match,
    Matcher,
    ignored,
    literal,
    mapped,
    one_of,
    pattern,
    repeated,
    satisfy,
)


def longest(matcher, text, pos=0):
    found = matcher.longest_prefix(text, pos)
    if found is None:
        return None
    return found.value, found.end


@pytest.mark.parametrize(
    "inp_str, expected",
    [("foo foo foo", ["foo", " ", "foo", " ", "foo"]), ("foo foobar", ["foo", " ", "foo"])],
)
def test_combinators(inp_str, expected):
    foo_matcher = literal("foo")
    space_matcher = literal(" ")

    values, end = longest(repeated(one_of(foo_matcher, space_matcher)), inp_str)

    assert values == expected
    assert end == len("".join(expected))


def test_pattern_is_leftmost_longest():
    assert longest(pattern("a|ab"), "abc") == ("ab", 2)


def test_pattern_action_and_offset():
    assert longest(pattern("[0-9]+", int), "x 123y", 2) == (123, 5)


def test_pattern_flags():
    assert longest(pattern("abc", flags=regex.IGNORECASE), "ABC") == ("ABC", 3)


def test_pattern_anchored_at_pos():
    assert pattern("[0-9]+").longest_prefix("a1", 0) is None


def test_pattern_can_match_empty():
    assert longest(pattern("[0-9]*"), "a") == ("", 0)


def test_action_is_not_called_until_value_is_used():
    calls = []

    def action(matched):
        calls.append(matched)
        return int(matched)

    found = pattern("[0-9]*", action).longest_prefix("a")
    assert found.end == 0
    assert calls == []

    found = pattern("[0-9]*", action).longest_prefix("12")
    assert found.value == 12
    assert found.value == 12
    assert calls == ["12"]


def test_one_of_only_builds_value_of_longest():
    def fail(_):
        raise AssertionError("value of shorter match was built")

    matcher = one_of(pattern("[a-z]", fail), pattern("[a-z]+"))
    assert longest(matcher, "abc") == ("abc", 3)


def test_one_of_prefers_longest():
    matcher = one_of(literal("if"), pattern("[a-z]+"))
    assert longest(matcher, "iffy") == ("iffy", 4)


def test_one_of_prefers_first_on_tie():
    matcher = one_of(literal("if", "KEYWORD"), pattern("[a-z]+"))
    assert longest(matcher, "if x") == ("KEYWORD", 2)


def test_one_of_no_match():
    assert one_of(literal("a"), literal("b")).longest_prefix("c") is None


def test_mapped_and_ignored():
    assert longest(mapped(literal("ab"), str.upper), "abc") == ("AB", 2)
    assert longest(ignored(pattern("[0-9]*", int)), "") == (None, 0)
    assert mapped(literal("ab"), str.upper).longest_prefix("c") is None
    assert ignored(literal("ab")).longest_prefix("c") is None


def test_satisfy():
    digit = satisfy(str.isdigit)
    assert longest(digit, "1a") == ("1", 1)
    assert digit.longest_prefix("a1") is None
    assert digit.longest_prefix("") is None


def test_repeated_matches_empty_prefix():
    assert longest(repeated(literal("a")), "bbb") == ([], 0)


def test_repeated_stops_on_empty_match():
    assert longest(repeated(pattern("a*")), "aab") == (["aa"], 2)


def test_combinators_require_matchers():
    with pytest.raises(TypeError):
        one_of(literal("a"), "b")


def test_custom_matcher():
    class Everything(Matcher):
        def longest_prefix(self, text, pos=0):
            return Match(len(text), lambda: text[pos:])

    assert longest(one_of(literal("a"), Everything()), "abc") == ("abc", 3)
