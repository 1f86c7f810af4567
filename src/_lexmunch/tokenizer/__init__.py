"""
In this module, tokenizing is a single left to right pass over a source
text annotated with positions. A token matcher and a filler matcher are
combined into one matcher, and at each point the longest prefix recognized
by the combination is consumed (the maximal munch rule). If no non-empty
prefix is recognized, tokenization stops with a LexicalError at that point.

There is no error recovery: the first position where no progress can be
made ends tokenization. Callers that want to continue past errors can do
so on top of Tokenizer.scan, see _lexmunch.lexing.skip_errors.

Tokenizer.tokens is lazy, tokens are only matched when requested and the
LexicalError is raised when the first token that can not be produced is
requested. Tokenizer.tokens_either consumes all tokens and returns either
all of them or the error.
"""

from .errors import AmbiguousMatchWarning, LexicalError
from .strategies import LexResult, Tokenizer
from .token import Located

__all__ = [
    "AmbiguousMatchWarning",
    "LexResult",
    "LexicalError",
    "Located",
    "Tokenizer",
]
