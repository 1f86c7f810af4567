"""
In this module, a matcher recognizes a prefix of a text starting at a given
offset and returns the longest one it can find as a Match, or None if it
recognizes no prefix at all. The value of a Match is computed on first
access, so only the values of matches that end up being used are built.

A matcher combinator is any function which takes matchers and returns a
matcher, see one_of, mapped, ignored and repeated.

The tokenizer only relies on the Matcher interface, so any pattern engine
that can report its longest matching prefix can be plugged in by
subclassing Matcher. Regular expressions are provided by pattern(), which
uses the POSIX (leftmost-longest) mode of the regex module so that
alternations inside one expression also follow the maximal munch rule.
"""

from .base import Match, Matcher
from .combinators import ignored, literal, mapped, one_of, repeated, satisfy
from .regex_matcher import RegexMatcher, pattern

__all__ = [
    "Match",
    "Matcher",
    "RegexMatcher",
    "ignored",
    "literal",
    "mapped",
    "one_of",
    "pattern",
    "repeated",
    "satisfy",
]
