from __future__ import annotations


class NilType:
    """The empty/false atom, written ``nil``."""

    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


class TType:
    """The true atom, written ``t``."""

    __slots__ = ()

    def __repr__(self): return "t"
    def __bool__(self): return True

    def __eq__(self, other):
        return isinstance(other, TType)

    def __hash__(self):
        return hash(TType)


Nil = NilType()
T = TType()


def wrap_bool(b: bool):
    return T if b else Nil
