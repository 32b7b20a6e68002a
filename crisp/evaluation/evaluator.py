"""Core evaluator for the Crisp interpreter.

One rule per value variant. Funcalls are handed to the dispatcher in
``crisp.evaluation.apply``; everything else is resolved here. There is no
trampoline: recursion depth follows the nesting depth of the program.
"""

from __future__ import annotations

from crisp import SExpression, LispValue
from crisp.evaluation.apply import call, run_body
from crisp.types.environment import Environment
from crisp.types.symbol import Quote, Symbol
from crisp.types.values import Funcall, List


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Reduce ``expr`` to a value in ``env``."""
    match expr:
        case Symbol(quote=Quote.SINGLE):
            return expr
        case Symbol(quote=Quote.EVAL):
            return evaluate(env.lookup(expr), env)
        case Symbol():
            return env.lookup(expr)

        case List(elements=elements):
            return List(tuple(evaluate(e, env) for e in elements))

        case Funcall(name=name, args=args):
            return call(env, name, list(args), evaluate)

    # --- Atoms return as-is ---
    return expr


def evaluate_body(forms, env: Environment) -> LispValue:
    """Evaluate ``forms`` in order in the current frame; the last value wins."""
    return run_body(forms, env, evaluate)
