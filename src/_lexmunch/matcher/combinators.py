from _lexmunch.matcher.base import Match, Matcher, check_matcher, constant_match


class FunctionMatcher(Matcher):
    """
    Matcher given by a function with the signature of
    Matcher.longest_prefix.
    """

    def __init__(self, function, name=None):
        self.function = function
        self.name = name or function.__name__

    def longest_prefix(self, text, pos=0):
        return self.function(text, pos)

    def __repr__(self):
        return f"<{self.name}>"


def literal(word, value=None):
    """
    Matcher for fixed words, ie. when the text contains 'tag'
    literal('tag') matches with the value 'tag' and end 3.

    :param word: Any string to be matched.
    :param value: The value of a match, defaults to word.
    """
    if value is None:
        value = word
    word_len = len(word)

    def literal_matcher(text, pos):
        if text.startswith(word, pos):
            return constant_match(pos + word_len, value)
        return None

    return FunctionMatcher(literal_matcher, f"literal {word!r}")


def satisfy(predicate):
    """
    Matcher for a single character, ie. satisfy(str.isdigit) matches
    the first character of "1a" but not of "a1".

    :param predicate: Function from a character to bool.
    """

    def satisfy_matcher(text, pos):
        if pos < len(text) and predicate(text[pos]):
            return constant_match(pos + 1, text[pos])
        return None

    return FunctionMatcher(satisfy_matcher, "satisfy")


def one_of(*matchers):
    """
    Combinator for matchers.

    :param matchers: List of matchers.
    :returns: A matcher that takes the longest match of any of the
        matchers. When several match prefixes of the same length, the
        one listed first wins.
    """
    matchers = [check_matcher(m) for m in matchers]

    def one_of_matcher(text, pos):
        best = None
        for matcher in matchers:
            found = matcher.longest_prefix(text, pos)
            if found is not None and (best is None or found.end > best.end):
                best = found
        return best

    return FunctionMatcher(one_of_matcher, "one_of")


def mapped(matcher, function):
    """
    Combinator for matcher.

    :param matcher: Any matcher.
    :param function: Function applied to the value of each match.
    :returns: Matcher matching the same prefixes as matcher with
        the values transformed by function.
    """
    check_matcher(matcher)

    def mapped_matcher(text, pos):
        found = matcher.longest_prefix(text, pos)
        if found is None:
            return None
        return Match(found.end, lambda: function(found.value))

    return FunctionMatcher(mapped_matcher, "mapped")


def ignored(matcher):
    """
    Combinator for matcher.

    :returns: Matcher matching the same prefixes as matcher, always
        with the value None. Useful for whitespace and comments.
    """
    check_matcher(matcher)

    def ignored_matcher(text, pos):
        found = matcher.longest_prefix(text, pos)
        if found is None:
            return None
        return constant_match(found.end, None)

    return FunctionMatcher(ignored_matcher, "ignored")


def repeated(matcher):
    """
    Combinator for matcher.

    :param matcher: Any matcher.
    :returns: Matcher that applies matcher zero or more times, until it
        fails or stops consuming characters. The value is the list of
        values of each application. Note that the result always
        matches, possibly the empty prefix.
    """
    check_matcher(matcher)

    def repeated_matcher(text, pos):
        found = []
        end = pos
        while True:
            step = matcher.longest_prefix(text, end)
            if step is None or step.end == end:
                break
            end = step.end
            found.append(step)
        return Match(end, lambda: [step.value for step in found])

    return FunctionMatcher(repeated_matcher, "repeated")
