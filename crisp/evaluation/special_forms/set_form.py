from crisp import SExpression, LispValue
from crisp.errors import CrispArgsMismatch
from crisp.evaluation.evaluator import evaluate
from crisp.types.environment import Environment
from crisp.types.symbol import Symbol


def _symbol_binding(
    name: str, env: Environment, tail: list[SExpression]
) -> tuple[Symbol, LispValue]:
    """Evaluate both halves of (name target value); the target must yield a Symbol."""
    if len(tail) != 2:
        raise CrispArgsMismatch(name, f"requires exactly 2 arguments: ({name} 'var value)")
    target_expr, val_expr = tail
    target = evaluate(target_expr, env)
    if not isinstance(target, Symbol):
        raise CrispArgsMismatch(name, f"first argument must evaluate to a symbol, got {target}")
    return target, evaluate(val_expr, env)


def set_form(env: Environment, tail: list[SExpression]) -> LispValue:
    """
    (set 'var value)
    Updates the innermost existing binding of var, or creates it at top level.
    """
    symbol, value = _symbol_binding("set", env, tail)
    closure = env.find_closure(symbol)
    if closure is None:
        closure = env.top_level()
    closure.put(symbol, value)
    return value


def let_form(env: Environment, tail: list[SExpression]) -> LispValue:
    """
    (let 'var value)
    Binds var in the frame of whoever called let, one below let's own frame.
    """
    symbol, value = _symbol_binding("let", env, tail)
    env.caller("let").put(symbol, value)
    return value
