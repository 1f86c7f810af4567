import lexmunch.version
from _lexmunch.lexing import skip_errors, tokenize_file, tokens, tokens_either
from _lexmunch.matcher import (
    Match,
    Matcher,
    ignored,
    literal,
    mapped,
    one_of,
    pattern,
    repeated,
    satisfy,
)
from _lexmunch.position import Position, Span
from _lexmunch.tokenizer import (
    AmbiguousMatchWarning,
    LexicalError,
    LexResult,
    Located,
    Tokenizer,
)
from _lexmunch.utils import logger

__version__ = lexmunch.version.version

__all__ = [
    "AmbiguousMatchWarning",
    "LexResult",
    "LexicalError",
    "Located",
    "Match",
    "Matcher",
    "Position",
    "Span",
    "Tokenizer",
    "ignored",
    "literal",
    "logger",
    "mapped",
    "one_of",
    "pattern",
    "repeated",
    "satisfy",
    "skip_errors",
    "tokenize_file",
    "tokens",
    "tokens_either",
]
