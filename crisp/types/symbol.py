from __future__ import annotations
import sys
from enum import Enum


class Quote(Enum):
    """How a symbol is evaluated where it appears."""

    NONE = ""      # resolved to its bound value
    SINGLE = "'"   # evaluates to the symbol itself
    EVAL = ","     # resolved, then the bound value is evaluated again

    @property
    def marker(self) -> str:
        return self.value


REST_MARKER = "..."


class Symbol:
    """A name plus its use-site properties (quote mode and rest flag).

    Equality compares all three; frames store values by ``name`` alone.
    """

    __slots__ = ("name", "quote", "rest")

    def __init__(self, name: str, quote: Quote = Quote.NONE, rest: bool = False):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(name))
        object.__setattr__(self, "quote", quote)
        object.__setattr__(self, "rest", rest)

    def __setattr__(self, key, value):
        raise AttributeError("Symbol is immutable")

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Symbol)
            and self.name == other.name
            and self.quote is other.quote
            and self.rest == other.rest
        )

    def __hash__(self) -> int:
        return hash((self.name, self.quote, self.rest))

    @property
    def is_quoted(self) -> bool:
        return self.quote is not Quote.NONE

    def __repr__(self):
        return f"Symbol({self.name!r}, {self.quote.name}, rest={self.rest})"

    def __str__(self):
        return self.quote.marker + self.name + (REST_MARKER if self.rest else "")
