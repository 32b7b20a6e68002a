"""Built-in functions for the Crisp runtime environment.

This module defines integer arithmetic, comparison, list access and
``debug``, plus the ``register`` step that installs them (and the control
forms) into an Environment's function table.

Every builtin is a native: it receives the unevaluated argument expressions
and evaluates them itself, left to right.
"""
from __future__ import annotations
from typing import Callable

from crisp import LispValue, SExpression
from crisp.errors import CrispArgsMismatch
from crisp.evaluation.evaluator import evaluate
from crisp.evaluation.special_forms import SPECIAL_FORMS
from crisp.types.environment import Environment
from crisp.types.function import Native
from crisp.types.nil import Nil, wrap_bool
from crisp.types.values import List, in_integer_range, is_integer


# -------------------------------
# Helpers
# -------------------------------
def _eval_args(env: Environment, expr: list[SExpression]) -> list[LispValue]:
    return [evaluate(e, env) for e in expr]


def _require_args(name: str, expr: list[SExpression], at_least: int = 1) -> None:
    if len(expr) < at_least:
        raise CrispArgsMismatch(name, f"requires at least {at_least} argument(s)")


def _eval_integers(name: str, env: Environment, expr: list[SExpression]) -> list[int]:
    values = _eval_args(env, expr)
    for v in values:
        if not is_integer(v):
            raise CrispArgsMismatch(name, f"expected an integer, got {v}")
    return values


def _checked(name: str, n: int) -> int:
    if not in_integer_range(n):
        raise CrispArgsMismatch(name, "integer overflow")
    return n


def _fold(name: str, env: Environment, expr: list[SExpression], op: Callable[[int, int], int]) -> int:
    _require_args(name, expr)
    first, *rest = _eval_integers(name, env, expr)
    result = first
    for x in rest:
        result = _checked(name, op(result, x))
    return result


def _truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[SExpression]) -> LispValue:
    """Return the sum of one or more integers."""
    return _fold("+", env, expr, lambda a, b: a + b)


def sub(env: Environment, expr: list[SExpression]) -> LispValue:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    if len(expr) == 1:
        (n,) = _eval_integers("-", env, expr)
        return _checked("-", -n)
    return _fold("-", env, expr, lambda a, b: a - b)


def mul(env: Environment, expr: list[SExpression]) -> LispValue:
    """Return the product of one or more integers."""
    return _fold("*", env, expr, lambda a, b: a * b)


def div(env: Environment, expr: list[SExpression]) -> LispValue:
    """Divide left-to-right, truncating toward zero."""
    def op(a: int, b: int) -> int:
        if b == 0:
            raise CrispArgsMismatch("/", "division by zero")
        return _truncating_div(a, b)
    return _fold("/", env, expr, op)


# -------------------------------
# Comparison
# -------------------------------
def _chain(values: list[LispValue], relation: Callable[[LispValue, LispValue], bool]) -> LispValue:
    return wrap_bool(all(relation(a, b) for a, b in zip(values, values[1:])))


def equals(env: Environment, expr: list[SExpression]) -> LispValue:
    """t if all arguments are structurally equal, else nil."""
    _require_args("=", expr)
    return _chain(_eval_args(env, expr), lambda a, b: a == b)


def not_equals(env: Environment, expr: list[SExpression]) -> LispValue:
    """Logical negation of =."""
    _require_args("/=", expr)
    return wrap_bool(equals(env, expr) is Nil)


def _comparison(name: str, relation: Callable[[int, int], bool]):
    def compare(env: Environment, expr: list[SExpression]) -> LispValue:
        _require_args(name, expr)
        return _chain(_eval_integers(name, env, expr), relation)
    compare.__name__ = f"compare_{name}"
    compare.__doc__ = f"Chainable {name} over integers: t if it holds for every adjacent pair."
    return compare


lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)


# -------------------------------
# Lists
# -------------------------------
def _list_arg(name: str, env: Environment, expr: list[SExpression]) -> List:
    if len(expr) != 1:
        raise CrispArgsMismatch(name, "requires exactly 1 argument")
    xs = evaluate(expr[0], env)
    if not isinstance(xs, List):
        raise CrispArgsMismatch(name, f"expected a list, got {xs}")
    return xs


def car(env: Environment, expr: list[SExpression]) -> LispValue:
    """Evaluate and return the first element of a list; nil for the empty list."""
    xs = _list_arg("car", env, expr)
    if not xs.elements:
        return Nil
    return evaluate(xs.elements[0], env)


def cdr(env: Environment, expr: list[SExpression]) -> LispValue:
    """Evaluate and return every element but the first, as a list."""
    xs = _list_arg("cdr", env, expr)
    return evaluate(List(xs.elements[1:]), env)


# -------------------------------
# Output
# -------------------------------
def debug(env: Environment, expr: list[SExpression]) -> LispValue:
    """Print each evaluated argument on its own line; returns nil."""
    for value in _eval_args(env, expr):
        print(value)
    return Nil


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "/=": not_equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "car": car,
    "cdr": cdr,
    "debug": debug,
}


def register(env: Environment) -> None:
    """Register the control forms and all builtin functions into the given environment."""
    for name, callback in {**SPECIAL_FORMS, **BUILTINS}.items():
        env.add_function(name, Native(name, callback))
