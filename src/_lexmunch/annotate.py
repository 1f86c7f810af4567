from dataclasses import dataclass

from _lexmunch.position import Position, advance_position, start_position


@dataclass(frozen=True)
class AnnotatedChar:
    """
    A character of the source together with the position
    where it starts and the position immediately after it.

    Seen from the following character, position is the position
    immediately before it: a token ends at the position of the first
    character it does not consume, or at the following position of its
    last character when it consumes the rest of the source.
    """

    char: str
    position: Position
    following: Position


def annotate(source, text, tab_width=1):
    """
    Pairs each character of text with its position in the given source.

    >>> [(a.char, a.position.offset, a.following.offset) for a in annotate("f", "ab")]
    [('a', 0, 1), ('b', 1, 2)]

    :param source: The name of the source, used in the positions.
    :param text: The contents of the source.
    :param tab_width: See advance_position.
    :returns: Generator of AnnotatedChar, one for each character of text.
    """
    position = start_position(source)
    for char in text:
        following = advance_position(position, char, tab_width)
        yield AnnotatedChar(char, position, following)
        position = following
