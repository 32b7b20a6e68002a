from crisp import SExpression, LispValue
from crisp.errors import CrispArgsMismatch
from crisp.evaluation.evaluator import evaluate, evaluate_body
from crisp.types.environment import Environment
from crisp.types.nil import Nil
from crisp.types.values import is_nil


def if_form(env: Environment, tail: list[SExpression]) -> LispValue:
    """(if cond then else...)"""
    if len(tail) < 2:
        raise CrispArgsMismatch("if", "requires a condition and a then-expression")

    cond, then, *otherwise = tail
    if not is_nil(evaluate(cond, env)):
        return evaluate(then, env)
    # the else part is an implicit progn
    return evaluate_body(otherwise, env)


def when_form(env: Environment, tail: list[SExpression]) -> LispValue:
    """(when cond body...)"""
    if len(tail) < 2:
        raise CrispArgsMismatch("when", "requires a condition and a body")

    cond, *body = tail
    if is_nil(evaluate(cond, env)):
        return Nil
    return evaluate_body(body, env)
