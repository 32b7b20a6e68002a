from __future__ import annotations

from crisp import EvaluatorFn, SExpression
from crisp.errors import CrispArgsMismatch
from crisp.types.environment import Closure, Environment
from crisp.types.symbol import Quote, Symbol
from crisp.types.values import List


def validate_params(name: str, params: list[Symbol]) -> None:
    """At most one rest parameter, and only in the last position."""
    for i, p in enumerate(params):
        if p.rest and i != len(params) - 1:
            raise CrispArgsMismatch(
                name, f"rest parameter {p} must be the last parameter"
            )


def bind_arguments(
    name: str,
    params: tuple[Symbol, ...],
    supplied_args: list[SExpression],
    frame: Closure,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> None:
    """
    Bind the argument expressions of a call to ``params`` inside ``frame``.

    ``frame`` must already be pushed on ``env``: arguments are evaluated with
    it in place, and single-quoted parameters receive the expression itself.

    Supports:
    - Positional required parameters
    - A trailing rest parameter (``xs...``) capturing the remaining
      arguments as a List
    """
    supplied = list(supplied_args)

    for p in params:
        if p.rest:
            value = List(tuple(supplied))
            supplied = []
            if p.quote is not Quote.SINGLE:
                value = evaluate_fn(value, env)
            frame.put(p, value)
            break

        if not supplied:
            missing = params[params.index(p):]
            raise CrispArgsMismatch(
                name,
                f"too few arguments; missing {[str(s) for s in missing]}",
            )
        expr = supplied.pop(0)
        value = expr if p.quote is Quote.SINGLE else evaluate_fn(expr, env)
        frame.put(p, value)

    if supplied:
        raise CrispArgsMismatch(
            name, f"too many arguments: {' '.join(str(a) for a in supplied)}"
        )
