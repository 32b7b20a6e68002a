"""Function dispatch for Crisp.

Every Funcall goes through ``call``:
- the name is resolved in the Environment's function table before anything
  else, so an unknown name never pushes a frame;
- a frame labelled with the name is pushed for the duration of the call and
  popped on every exit path;
- natives get the unevaluated argument expressions, Defuns get their
  parameters bound (see ``crisp.types.bind``) and their body evaluated in
  that same frame.
"""

from __future__ import annotations

from typing import Iterable

from crisp import EvaluatorFn, LispValue, SExpression
from crisp.errors import CrispFunctionDefinitionIsVoid
from crisp.types.bind import bind_arguments
from crisp.types.environment import Environment
from crisp.types.function import Defun, Function, Native
from crisp.types.nil import Nil
from crisp.types.symbol import Symbol


def run_body(
    forms: Iterable[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate ``forms`` in order in the current frame; the last value wins."""
    result: LispValue = Nil
    for form in forms:
        result = evaluate_fn(form, env)
    return result


def apply_defun(
    fn: Defun,
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind ``args`` into the innermost frame, then run the body there."""
    bind_arguments(fn.name, fn.params, args, env.current(), env, evaluate_fn)
    return run_body(fn.body, env, evaluate_fn)


def apply(
    fn: Function,
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Invoke ``fn`` in the already-pushed frame."""
    match fn:
        case Native(callback=callback):
            return callback(env, args)
        case Defun():
            return apply_defun(fn, args, env, evaluate_fn)
    raise TypeError(f"Cannot apply non-function {fn!r}")


def call(
    env: Environment,
    name: Symbol,
    args: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    fn = env.get_function(name)
    if fn is None:
        raise CrispFunctionDefinitionIsVoid(name.name)
    with env.frame(name.name):
        return apply(fn, args, env, evaluate_fn)
