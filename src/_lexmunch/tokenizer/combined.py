import warnings
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Optional

from _lexmunch.matcher.base import Match, check_matcher
from _lexmunch.tokenizer.errors import AmbiguousMatchWarning


@unique
class OutcomeKind(Enum):
    TOKEN = auto()
    FILLER = auto()


@dataclass(frozen=True)
class MatchOutcome:
    """
    The longest match at some offset, either of the token
    matcher or of the filler matcher.
    """

    kind: OutcomeKind
    end: int
    match: Optional[Match] = None

    @property
    def is_token(self):
        return self.kind == OutcomeKind.TOKEN

    @property
    def value(self):
        """
        The token value, built by the token matcher on first access.
        None for filler.
        """
        if not self.is_token:
            return None
        return self.match.value


class CombinedMatcher:
    """
    Combines a token matcher and a filler matcher into one matcher that
    reports the longest match of either, and which of the two it was.

    The token matcher is asked first, so when both match prefixes of equal
    length the token wins. As the two are expected to be disjoint, this is
    reported once with an AmbiguousMatchWarning.
    """

    def __init__(self, token_matcher, filler_matcher):
        """
        :param token_matcher: Matcher whose values are token values.
        :param filler_matcher: Matcher for whitespace, comments and other
            text that does not produce tokens. Its values are discarded.
        """
        self.token_matcher = check_matcher(token_matcher)
        self.filler_matcher = check_matcher(filler_matcher)
        self.has_warned = False

    def match(self, text, pos):
        """
        :returns: The MatchOutcome for the longest prefix of text[pos:],
            or None if neither matcher recognizes any prefix.
        """
        token = self.token_matcher.longest_prefix(text, pos)
        filler = self.filler_matcher.longest_prefix(text, pos)
        if token is None and filler is None:
            return None
        if filler is None or (token is not None and token.end >= filler.end):
            if filler is not None and token.end == filler.end > pos:
                self.warn_ambiguous(text, pos, token.end)
            return MatchOutcome(OutcomeKind.TOKEN, token.end, token)
        return MatchOutcome(OutcomeKind.FILLER, filler.end)

    def warn_ambiguous(self, text, pos, end):
        if self.has_warned:
            return
        self.has_warned = True
        warnings.warn(
            f"Both the token and the filler matcher match {text[pos:end]!r} "
            f"at offset {pos}, treating it as a token.",
            AmbiguousMatchWarning,
        )
