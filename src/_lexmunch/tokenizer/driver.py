"""
The scanning loop. At each offset the combined matcher is asked for the
longest match. A token match yields Emitted, a filler match yields Skipped,
and both continue after the matched characters. When there is no match,
or the longest match is empty, Stuck is yielded and scanning ends, as no
progress is possible. Scanning also ends when the input is exhausted.
"""

from collections import deque
from dataclasses import dataclass

from _lexmunch.position import Position, Span
from _lexmunch.tokenizer.token import Located
from _lexmunch.utils import logger


@dataclass(frozen=True)
class Emitted:
    token: Located


@dataclass(frozen=True)
class Skipped:
    span: Span


@dataclass(frozen=True)
class Stuck:
    position: Position


class AnnotatedWindow:
    """
    The annotated characters of a source from some offset onwards,
    pulled from the annotator only when indexed. Characters before
    the offset are dropped and can not be indexed again.
    """

    def __init__(self, annotated):
        """
        :param annotated: Iterable of AnnotatedChar, starting at offset 0.
        """
        self.annotated = iter(annotated)
        self.offset = 0
        self.chars = deque()

    def __getitem__(self, offset):
        if offset < self.offset:
            raise IndexError(f"Character at {offset} was already dropped")
        while len(self.chars) <= offset - self.offset:
            self.chars.append(next(self.annotated))
        return self.chars[offset - self.offset]

    def __len__(self):
        return len(self.chars)

    def drop_before(self, offset):
        while self.offset < offset:
            if self.chars:
                self.chars.popleft()
            else:
                next(self.annotated)
            self.offset += 1


def match_end_position(chars, text, end):
    """
    The position where a match ending at offset end stops, ie. the
    position of the first character not matched, or, when the whole
    remaining input was matched, the position following the last one.
    """
    if end < len(text):
        return chars[end].position
    return chars[end - 1].following


def scan(matcher, text, chars, start=0):
    """
    Generator of scanning steps, see module documentation.

    Nothing is matched before the first step is requested, and the
    match for step i+1 is only attempted once step i has been consumed.
    Annotated characters are pulled up to one past the current match
    and dropped once matched.

    :param matcher: A CombinedMatcher.
    :param text: The source text.
    :param chars: AnnotatedWindow over the annotated characters of text.
    :param start: Offset in text where scanning starts.
    """
    pos = start
    chars.drop_before(pos)
    while pos < len(text):
        here = chars[pos].position
        outcome = matcher.match(text, pos)
        if outcome is None or outcome.end == pos:
            logger.debug(
                "No %s at %s",
                "match" if outcome is None else "non-empty match",
                here.display(),
            )
            yield Stuck(here)
            return
        if not pos < outcome.end <= len(text):
            raise ValueError(
                f"Matcher reported match ending at {outcome.end} "
                f"for text of length {len(text)} starting at {pos}"
            )
        span = Span(here, match_end_position(chars, text, outcome.end))
        chars.drop_before(outcome.end)
        if outcome.is_token:
            yield Emitted(Located(outcome.value, span))
        else:
            yield Skipped(span)
        pos = outcome.end
    logger.debug("Scanned %d characters", len(text) - start)
