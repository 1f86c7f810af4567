import pathlib

from _lexmunch.tokenizer import LexicalError, Tokenizer
from _lexmunch.tokenizer.combined import CombinedMatcher
from _lexmunch.tokenizer.driver import AnnotatedWindow, Emitted, Stuck, scan


def tokens(token_matcher, filler_matcher, source, text, tab_width=1):
    """
    Lazily tokenize text, ie.

    >>> from _lexmunch.matcher import pattern
    >>> toks = tokens(pattern("[0-9]+", int), pattern(" +"), "input", "12 3a")
    >>> next(toks).value
    12
    >>> next(toks).value
    3

    raises LexicalError only when the token after 3 is requested.
    See Tokenizer.tokens.
    """
    return Tokenizer(token_matcher, filler_matcher, tab_width).tokens(source, text)


def tokens_either(token_matcher, filler_matcher, source, text, tab_width=1):
    """
    Tokenize all of text, returning a LexResult with either the tokens
    or the first LexicalError. See Tokenizer.tokens_either.
    """
    return Tokenizer(token_matcher, filler_matcher, tab_width).tokens_either(
        source, text
    )


def tokenize_file(
    filelike, token_matcher, filler_matcher, encoding="utf8", tab_width=1
):
    """
    Reads the given file and tokenizes all of it, using the file name
    as the source of positions.

    :param filelike: Either a path to a file or a text stream.
    :returns: LexResult, see Tokenizer.tokens_either.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        source = str(filelike)
        text = pathlib.Path(filelike).read_text(encoding=encoding)
    else:
        source = getattr(filelike, "name", "<stream>")
        text = filelike.read()
    return tokens_either(token_matcher, filler_matcher, source, text, tab_width)


def skip_errors(tokenizer, source, text):
    """
    Tokenizes all of text, skipping one character whenever no
    progress can be made and resuming after it. Matchers always see
    the whole text, so patterns looking behind the resumption point
    behave as without the error.

    :param tokenizer: A Tokenizer.
    :returns: Tuple of the list of all Located tokens found and the list
        of LexicalError for each skipped character.
    """
    chars = AnnotatedWindow(tokenizer.annotate(source, text))
    matcher = CombinedMatcher(tokenizer.token_matcher, tokenizer.filler_matcher)
    found = []
    errors = []
    resume = 0
    while resume < len(text):
        start = resume
        resume = len(text)
        for step in scan(matcher, text, chars, start):
            if isinstance(step, Emitted):
                found.append(step.token)
            elif isinstance(step, Stuck):
                errors.append(LexicalError(step.position))
                resume = step.position.offset + 1
    return found, errors
