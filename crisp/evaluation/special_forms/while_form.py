from crisp import SExpression, LispValue
from crisp.errors import CrispArgsMismatch
from crisp.evaluation.evaluator import evaluate, evaluate_body
from crisp.types.environment import Environment
from crisp.types.nil import Nil
from crisp.types.values import is_nil


def while_form(env: Environment, tail: list[SExpression]) -> LispValue:
    """
    (while cond body...)
    The condition is re-evaluated before every pass; the body runs for effect.
    Always returns nil.
    """
    if len(tail) < 2:
        raise CrispArgsMismatch("while", "requires a condition and a body")

    cond, *body = tail
    while not is_nil(evaluate(cond, env)):
        evaluate_body(body, env)
    return Nil
