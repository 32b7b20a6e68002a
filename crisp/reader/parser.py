"""
  Crisp Reader

- Whole-buffer parsing: one call turns one piece of text into exactly one value.
  Callers holding several top-level forms wrap them in (progn ...) first.
- Recognizers are tried in a fixed order; the first one whose precondition
  matches the text decides, and its errors are final:

    1. integer   [+-]?[0-9]+, signed 32-bit
    2. special   t, nil
    3. string    "..." with \\" \\n \\t \\\\ escapes
    4. symbol    optional ' or , prefix, optional ... suffix
    5. brackets  (call args...) or [list elements...]

- (...) is a Funcall only when its head is an unquoted symbol; [...] is always
  a List. Nothing is inferred at evaluation time.
"""

from __future__ import annotations

import re
import string
from typing import Iterator

from crisp import SExpression
from crisp.errors import (
    CrispEmptyCall,
    CrispIntegerOverflow,
    CrispInvalidCall,
    CrispInvalidEscape,
    CrispMalformedInput,
    CrispNoParserAvailable,
    CrispUnmatchedBrackets,
)
from crisp.types.nil import Nil, T
from crisp.types.symbol import Quote, Symbol, REST_MARKER
from crisp.types.values import INTEGER_MAX, INTEGER_MIN, Funcall, List, String


INTEGER_RE = re.compile(r"[+-]?[0-9]+")

SPECIALS: dict[str, SExpression] = {
    "t": T,
    "nil": Nil,
}

ESCAPES: dict[str, str] = {
    '"': '"',
    "n": "\n",
    "t": "\t",
    "\\": "\\",
}

QUOTE_MARKERS: dict[str, Quote] = {
    Quote.SINGLE.marker: Quote.SINGLE,
    Quote.EVAL.marker: Quote.EVAL,
}

SYMBOL_CHARS = frozenset(
    string.ascii_letters + string.digits + "!#$%&*+-./:;<=>?@^_|~"
)

BRACKETS: dict[str, str] = {"(": ")", "[": "]"}
CLOSERS = frozenset(BRACKETS.values())


# ----------------------
# Recognizers
# ----------------------
class IntegerParser:
    def can_parse(self, text: str) -> bool:
        return INTEGER_RE.fullmatch(text) is not None

    def parse(self, text: str) -> SExpression:
        negative = text[0] == "-"
        digits = text[1:] if text[0] in "+-" else text
        # magnitude bound differs by one between the two signs
        limit = -INTEGER_MIN if negative else INTEGER_MAX

        n = 0
        for d in digits:
            n = n * 10 + (ord(d) - ord("0"))
            if n > limit:
                raise CrispIntegerOverflow(f"Integer literal out of range: {text}")
        return -n if negative else n


class SpecialParser:
    def can_parse(self, text: str) -> bool:
        return text in SPECIALS

    def parse(self, text: str) -> SExpression:
        return SPECIALS[text]


class StringParser:
    def can_parse(self, text: str) -> bool:
        return text.startswith('"')

    def parse(self, text: str) -> SExpression:
        chars: list[str] = []
        i = 1
        n = len(text)
        while i < n:
            c = text[i]
            if c == "\\":
                if i + 1 >= n:
                    break
                escaped = text[i + 1]
                if escaped not in ESCAPES:
                    raise CrispInvalidEscape(f"Invalid escape sequence: \\{escaped}")
                chars.append(ESCAPES[escaped])
                i += 2
                continue
            if c == '"':
                if i != n - 1:
                    raise CrispMalformedInput(
                        f"Unexpected characters after string literal: {text[i + 1:]!r}"
                    )
                return String("".join(chars))
            chars.append(c)
            i += 1
        raise CrispMalformedInput(f"Unterminated string literal: {text}")


class SymbolParser:
    def can_parse(self, text: str) -> bool:
        return text[0] in QUOTE_MARKERS or text[0] in SYMBOL_CHARS

    def parse(self, text: str) -> SExpression:
        quote = QUOTE_MARKERS.get(text[0], Quote.NONE)
        name = text[1:] if quote is not Quote.NONE else text

        rest = False
        # A bare "..." is a name, not an empty rest parameter
        if name.endswith(REST_MARKER) and len(name) > len(REST_MARKER):
            name = name[: -len(REST_MARKER)]
            rest = True

        if not name:
            raise CrispMalformedInput(f"Empty symbol name: {text!r}")
        for c in name:
            if c not in SYMBOL_CHARS:
                raise CrispMalformedInput(f"Illegal character in symbol {text!r}: {c!r}")
        return Symbol(name, quote, rest)


class BracketParser:
    def can_parse(self, text: str) -> bool:
        return text[0] in BRACKETS

    def parse(self, text: str) -> SExpression:
        check_balanced(text)
        elements = [parse(piece) for piece in split_top_level(text[1:-1])]

        if text[-1] == "]":
            return List(tuple(elements))

        if not elements:
            raise CrispEmptyCall("Cannot call ()")
        head, *args = elements
        if not isinstance(head, Symbol) or head.is_quoted:
            raise CrispInvalidCall(f"Invalid function call head: {head}")
        return Funcall(head, tuple(args))


RECOGNIZERS = (
    IntegerParser(),
    SpecialParser(),
    StringParser(),
    SymbolParser(),
    BracketParser(),
)


def parse(text: str) -> SExpression:
    """Parse ``text`` into exactly one value."""
    text = text.strip()
    if text:
        for recognizer in RECOGNIZERS:
            if recognizer.can_parse(text):
                return recognizer.parse(text)
    raise CrispNoParserAvailable(f"No parser available for {text!r}")


# ----------------------
# Bracket helpers
# ----------------------
def _scan(text: str) -> Iterator[tuple[int, str, bool]]:
    """Yield (index, char, inside_string) for each character of ``text``.

    String literals are skipped over as a unit so brackets and whitespace
    inside them are never structural.
    """
    in_string = False
    escaped = False
    for i, c in enumerate(text):
        if in_string:
            yield i, c, True
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == '"':
                in_string = False
            continue
        if c == '"':
            in_string = True
            yield i, c, True
            continue
        yield i, c, False


def check_balanced(text: str) -> None:
    """The opening bracket at ``text[0]`` must be closed by ``text[-1]``."""
    expected: list[str] = []
    for i, c, in_string in _scan(text):
        if in_string:
            continue
        if c in BRACKETS:
            expected.append(BRACKETS[c])
        elif c in CLOSERS:
            if not expected or expected.pop() != c:
                raise CrispUnmatchedBrackets(f"Unmatched {c!r} at position {i}")
            if not expected and i != len(text) - 1:
                raise CrispMalformedInput(
                    f"Unexpected characters after closing {c!r}: {text[i + 1:]!r}"
                )
    if expected:
        raise CrispUnmatchedBrackets(f"Missing {''.join(reversed(expected))!r}")


def split_top_level(text: str) -> list[str]:
    """Split on whitespace that is outside any nested bracket or string."""
    pieces: list[str] = []
    current: list[str] = []
    depth = 0
    for _, c, in_string in _scan(text):
        if not in_string:
            if c in BRACKETS:
                depth += 1
            elif c in CLOSERS:
                depth -= 1
            elif c.isspace() and depth == 0:
                if current:
                    pieces.append("".join(current))
                    current = []
                continue
        current.append(c)
    if current:
        pieces.append("".join(current))
    return pieces
