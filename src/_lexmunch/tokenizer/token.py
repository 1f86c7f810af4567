from dataclasses import dataclass
from typing import Any

from _lexmunch.position import Span


@dataclass(frozen=True)
class Located:
    """
    A token value produced by the token matcher together with
    the span of the source it was matched from.
    """

    value: Any
    span: Span

    @property
    def start(self):
        return self.span.start

    @property
    def end(self):
        return self.span.end
