from dataclasses import dataclass
from typing import Optional, Tuple

from _lexmunch.annotate import annotate
from _lexmunch.tokenizer.combined import CombinedMatcher
from _lexmunch.tokenizer.driver import AnnotatedWindow, Emitted, Stuck, scan
from _lexmunch.tokenizer.errors import LexicalError
from _lexmunch.tokenizer.token import Located


@dataclass(frozen=True)
class LexResult:
    """
    The result of tokenizing a whole source: either all of
    its tokens or the first lexical error, never both.
    """

    tokens: Optional[Tuple[Located, ...]] = None
    error: Optional[LexicalError] = None

    def __post_init__(self):
        if (self.tokens is None) == (self.error is None):
            raise ValueError("LexResult has exactly one of tokens and error")

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """
        :returns: The tokens if tokenization succeeded.
        :raises LexicalError: if it did not.
        """
        if self.error is not None:
            raise self.error
        return self.tokens


class Tokenizer:
    """
    Splits source texts into tokens with the maximal munch rule: at each
    point the longest prefix recognized by either the token matcher or the
    filler matcher is consumed. Token matches produce a Located token,
    filler matches (whitespace, comments) are dropped.

    >>> from _lexmunch.matcher import pattern
    >>> tokenizer = Tokenizer(pattern("[0-9]+", int), pattern(" +"))
    >>> [t.value for t in tokenizer.tokens("input", "12 34")]
    [12, 34]

    """

    def __init__(self, token_matcher, filler_matcher, tab_width=1):
        """
        :param token_matcher: Matcher for tokens, its values become
            the values of the Located tokens.
        :param filler_matcher: Matcher for text between tokens.
        :param tab_width: Width of tab stops used for column numbers,
            see advance_position.
        """
        if not isinstance(tab_width, int) or tab_width < 1:
            raise ValueError(f"tab_width has to be a positive integer, got {tab_width}")
        self.token_matcher = token_matcher
        self.filler_matcher = filler_matcher
        self.tab_width = tab_width
        # Validates the matchers
        CombinedMatcher(token_matcher, filler_matcher)

    def annotate(self, source, text):
        return annotate(source, text, self.tab_width)

    def scan(self, source, text):
        """
        :returns: Generator of the scanning steps (Emitted, Skipped and
            a final Stuck on failure) for the given source text.
        """
        matcher = CombinedMatcher(self.token_matcher, self.filler_matcher)
        return scan(matcher, text, AnnotatedWindow(self.annotate(source, text)))

    def tokens(self, source, text):
        """
        Lazily tokenize text. Tokens are matched as they are requested,
        so reading a prefix of the tokens does not look further into the
        text than needed.

        :param source: Name of the source, used in positions.
        :param text: The text to tokenize.
        :returns: Generator of Located tokens.
        :raises LexicalError: when the token following the last
            successfully matched one is requested and no progress
            can be made.
        """
        for step in self.scan(source, text):
            if isinstance(step, Emitted):
                yield step.token
            elif isinstance(step, Stuck):
                raise LexicalError(step.position)

    def tokens_either(self, source, text):
        """
        Tokenize all of text.

        :returns: LexResult with either the tuple of all tokens or the
            first LexicalError.
        """
        tokens = []
        try:
            for token in self.tokens(source, text):
                tokens.append(token)
        except LexicalError as err:
            return LexResult(error=err)
        return LexResult(tokens=tuple(tokens))
