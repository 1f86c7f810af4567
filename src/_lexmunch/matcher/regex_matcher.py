import regex

from _lexmunch.matcher.base import Match, Matcher


class RegexMatcher(Matcher):
    """
    Matches the longest prefix recognized by a regular expression.

    The expression is compiled in POSIX mode, ie. for "a|ab" the
    prefix "ab" is preferred over "a" even though "a" is listed first.
    """

    def __init__(self, expression, action=None, flags=0):
        """
        :param expression: A regular expression in the syntax of the
            regex module.
        :param action: Function called with the matched string to produce
            the value of a match. If None, the value is the matched string.
            Only called for matches whose value is used.
        :param flags: Additional regex flags, eg. regex.IGNORECASE.
        """
        self.expression = expression
        self.action = action
        self.compiled = regex.compile(expression, flags | regex.POSIX)

    def longest_prefix(self, text, pos=0):
        found = self.compiled.match(text, pos)
        if found is None:
            return None
        matched = found.group()
        if self.action is None:
            return Match(found.end(), lambda: matched)
        return Match(found.end(), lambda: self.action(matched))

    def __repr__(self):
        return f"RegexMatcher({self.expression!r})"


def pattern(expression, action=None, flags=0):
    """
    Matcher combinator for regular expressions, ie.
    pattern(r"[0-9]+", int) matches "12" in "12 34" with the value 12.
    """
    return RegexMatcher(expression, action, flags)
