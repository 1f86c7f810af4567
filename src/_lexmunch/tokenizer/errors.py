class LexicalError(Exception):
    """
    Raised (or returned by Tokenizer.tokens_either) when neither the token
    matcher nor the filler matcher recognizes a non-empty prefix at
    the given position.

    Two lexical errors are equal when their positions are equal.
    """

    def __init__(self, position):
        """
        :param position: The Position where no progress could be made.
        """
        super().__init__(position)
        self.position = position

    def __str__(self):
        return f"Lexical error at {self.position.display()}"

    def __repr__(self):
        return f"LexicalError({self.position!r})"

    def __eq__(self, other):
        if not isinstance(other, LexicalError):
            return NotImplemented
        return self.position == other.position

    def __hash__(self):
        return hash(self.position)


class AmbiguousMatchWarning(UserWarning):
    """
    Emitted when the token matcher and the filler matcher both match
    a prefix of the same length. The token is chosen in that case.
    """

    pass
