from abc import ABC, abstractmethod
from functools import cached_property


class Match:
    """
    A prefix recognized by a matcher. The value of the match is only
    computed when first accessed, so matches that lose against a longer
    alternative, or that are empty, never run their actions.
    """

    def __init__(self, end, build):
        """
        :param end: Offset in the text just after the recognized prefix.
        :param build: Function without arguments computing the value.
        """
        self.end = end
        self.build = build

    @cached_property
    def value(self):
        return self.build()

    def __repr__(self):
        return f"Match(end={self.end})"


def constant_match(end, value):
    return Match(end, lambda: value)


class Matcher(ABC):
    """
    Recognizes prefixes of a text.
    """

    @abstractmethod
    def longest_prefix(self, text, pos=0):
        """
        Find the longest prefix of text[pos:] recognized by the matcher.

        :param text: The string to match against.
        :param pos: Offset in text where the prefix starts.
        :returns: None if no prefix (not even the empty one) is recognized,
            otherwise a Match where text[pos:match.end] is the longest
            recognized prefix and match.value is what the matcher
            produces for it.
        """
        pass


def check_matcher(matcher):
    if not isinstance(matcher, Matcher):
        raise TypeError(f"Expected a Matcher, got {type(matcher).__name__}")
    return matcher
