"""Function representations stored in an Environment's function table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING

from crisp import SExpression, LispValue
from crisp.types.symbol import Symbol

if TYPE_CHECKING:
    from crisp.types.environment import Environment


NativeCallback = Callable[["Environment", list[SExpression]], LispValue]


@dataclass(frozen=True)
class Native:
    """An operation implemented in Python.

    The callback receives the live Environment and the *unevaluated*
    argument expressions, and evaluates whichever of them it needs.
    """

    name: str
    callback: NativeCallback

    def __str__(self) -> str:
        return f"<native {self.name}>"


@dataclass(frozen=True)
class Defun:
    """A function defined in Crisp with ``defun``."""

    name: str
    params: tuple[Symbol, ...]
    body: tuple[SExpression, ...]

    @property
    def rest_param(self) -> Symbol | None:
        if self.params and self.params[-1].rest:
            return self.params[-1]
        return None

    def __str__(self) -> str:
        params = " ".join(str(p) for p in self.params)
        return f"<defun {self.name} [{params}]>"


Function = Native | Defun
