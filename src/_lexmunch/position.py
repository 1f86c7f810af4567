"""
Positions and spans of characters in a named source text.

A position carries the line and column (both starting at 1) and the absolute
character offset (starting at 0) of a point in the source. Positions of the
same source are ordered by offset.
"""

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Position:
    source: str
    line: int
    column: int
    offset: int

    def _check_comparable(self, other):
        if self.source != other.source:
            raise ValueError(
                f"Cannot compare positions in {self.source!r} and {other.source!r}"
            )

    def __lt__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        self._check_comparable(other)
        return self.offset < other.offset

    def display(self):
        """
        :returns: The position formatted as source:line:column, for
            instance "input.txt:3:14".
        """
        return f"{self.source}:{self.line}:{self.column}"

    def __str__(self):
        return self.display()


def start_position(source):
    """
    :param source: The name of the source, typically a file name.
    :returns: The position of the first character of source.
    """
    return Position(source, 1, 1, 0)


def advance_position(position, char, tab_width=1):
    """
    The position following the character char when char is
    found at the given position.

    >>> advance_position(Position("f", 1, 1, 0), "\\n")
    Position(source='f', line=2, column=1, offset=1)

    :param position: The position of char.
    :param char: The character at position.
    :param tab_width: Width of a tab stop. With the default of 1,
        a tab occupies a single column like any other character.
    """
    if char == "\n":
        return Position(position.source, position.line + 1, 1, position.offset + 1)
    if char == "\t":
        column = position.column - 1
        column += tab_width - column % tab_width
        return Position(position.source, position.line, column + 1, position.offset + 1)
    return Position(
        position.source, position.line, position.column + 1, position.offset + 1
    )


@dataclass(frozen=True)
class Span:
    """
    The half-open region [start, end) of a source.
    """

    start: Position
    end: Position

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(f"Span ends at {self.end} before it starts at {self.start}")

    def __len__(self):
        return self.end.offset - self.start.offset

    def display(self):
        return (
            f"{self.start.source}:{self.start.line}:{self.start.column}"
            f"-{self.end.line}:{self.end.column}"
        )

    def __str__(self):
        return self.display()
