from crisp import SExpression, LispValue
from crisp.evaluation.evaluator import evaluate_body
from crisp.types.environment import Environment


def progn_form(env: Environment, tail: list[SExpression]) -> LispValue:
    """(progn form...) evaluates each form in order and returns the last (nil if none)."""
    return evaluate_body(tail, env)
