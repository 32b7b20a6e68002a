"""Compound and string values of the Crisp data model.

Integers are plain Python ints kept inside the signed 32-bit range; ``nil``
and ``t`` live in ``crisp.types.nil``; symbols in ``crisp.types.symbol``.
Every value renders back to source text with ``str``.
"""

from __future__ import annotations

from dataclasses import dataclass

from crisp import LispValue
from crisp.types.nil import NilType
from crisp.types.symbol import Symbol


INTEGER_MIN = -(2 ** 31)
INTEGER_MAX = 2 ** 31 - 1

_STRING_ESCAPES = str.maketrans({
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
})


def is_integer(value: LispValue) -> bool:
    # bool is an int subclass but never a Crisp value
    return isinstance(value, int) and not isinstance(value, bool)


def in_integer_range(n: int) -> bool:
    return INTEGER_MIN <= n <= INTEGER_MAX


@dataclass(frozen=True, slots=True)
class String:
    value: str

    def __str__(self):
        return '"' + self.value.translate(_STRING_ESCAPES) + '"'


@dataclass(frozen=True, slots=True)
class Funcall:
    """``(name arg...)``: call the operation registered under ``name``."""

    name: Symbol
    args: tuple[LispValue, ...] = ()

    def __str__(self):
        return "(" + " ".join(str(part) for part in (self.name, *self.args)) + ")"


@dataclass(frozen=True, slots=True)
class List:
    """``[element...]``: literal data, never a call."""

    elements: tuple[LispValue, ...] = ()

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __str__(self):
        return "[" + " ".join(str(e) for e in self.elements) + "]"


def is_nil(value: LispValue) -> bool:
    """Nil, the empty list and the empty string are false; everything else is true."""
    match value:
        case NilType():
            return True
        case List(elements=elements):
            return not elements
        case String(value=s):
            return not s
        case _:
            return False
