"""Runtime environment for Crisp.

The Environment owns a stack of Closures (one per active call, with the
persistent top level at index 0) and the table of named functions. Symbols
are resolved by scanning the stack from the innermost frame outwards.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from crisp import LispValue
from crisp.errors import CrispVariableIsVoid, CrispArgsMismatch
from crisp.types.function import Function
from crisp.types.symbol import Symbol


logger = logging.getLogger(__name__)

TOP_LEVEL_LABEL = "top-level"


class Closure:
    """Bindings for a single call, keyed by symbol name."""

    __slots__ = ("label", "vars")

    def __init__(self, label: str):
        self.label: str = label
        self.vars: dict[str, LispValue] = {}

    def get(self, symbol: Symbol) -> LispValue:
        return self.get_str(symbol.name)

    def get_str(self, name: str) -> LispValue:
        return self.vars[name]

    def put(self, symbol: Symbol, value: LispValue) -> None:
        # quote mode and rest flag are use-site properties, not identity
        self.put_str(symbol.name, value)

    def put_str(self, name: str, value: LispValue) -> None:
        self.vars[name] = value

    def __contains__(self, symbol: Symbol) -> bool:
        return symbol.name in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"{self.label} ")
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"


class Environment:
    """Frame stack plus function table for one evaluation session."""

    __slots__ = ("frames", "functions")

    def __init__(self):
        self.frames: list[Closure] = [Closure(TOP_LEVEL_LABEL)]
        self.functions: dict[str, Function] = {}

    # --- Frames ---
    def top_level(self) -> Closure:
        return self.frames[0]

    def current(self) -> Closure:
        return self.frames[-1]

    def caller(self, name: str = "let") -> Closure:
        """The frame one level below the innermost one."""
        if self.depth < 2:
            raise CrispArgsMismatch(name, "no calling frame to bind into")
        return self.frames[-2]

    @property
    def depth(self) -> int:
        return len(self.frames)

    @contextmanager
    def frame(self, label: str) -> Iterator[Closure]:
        """Push a new frame for the duration of a call; always popped on exit."""
        closure = Closure(label)
        self.frames.append(closure)
        logger.debug("push %s (depth %d)", label, self.depth)
        try:
            yield closure
        finally:
            popped = self.frames.pop()
            assert popped is closure, "frame stack out of order"
            logger.debug("pop %s (depth %d)", label, self.depth)

    def iter_frames(self) -> Iterator[Closure]:
        """Innermost frame first."""
        return reversed(self.frames)

    # --- Variables ---
    def find_closure(self, symbol: Symbol) -> Optional[Closure]:
        """Find the innermost frame that binds ``symbol``'s name."""
        for closure in self.iter_frames():
            if symbol in closure:
                return closure
        return None

    def lookup(self, symbol: Symbol) -> LispValue:
        """Look up the value bound to ``symbol``, innermost frame first.

        Raises CrispVariableIsVoid if no frame binds it.
        """
        closure = self.find_closure(symbol)
        if closure is None:
            raise CrispVariableIsVoid(symbol.name)
        return closure.get(symbol)

    # --- Functions ---
    def add_function(self, name: Symbol | str, function: Function) -> None:
        """Register ``function``; an existing registration is replaced."""
        key = name.name if isinstance(name, Symbol) else name
        if key in self.functions:
            logger.debug("redefining function %s", key)
        else:
            logger.debug("defining function %s", key)
        self.functions[key] = function

    def get_function(self, name: Symbol | str) -> Optional[Function]:
        key = name.name if isinstance(name, Symbol) else name
        return self.functions.get(key)

    def __str__(self) -> str:
        return " -> ".join(str(c) for c in self.frames)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment frames: ")
            buffer.write(str(self))
            buffer.write(f"; functions: {', '.join(sorted(self.functions))}>")
            return buffer.getvalue()
