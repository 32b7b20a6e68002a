import logging

from crisp import SExpression, LispValue
from crisp.errors import CrispArgsMismatch
from crisp.types.bind import validate_params
from crisp.types.environment import Environment
from crisp.types.function import Defun
from crisp.types.nil import Nil
from crisp.types.symbol import Symbol
from crisp.types.values import List


logger = logging.getLogger(__name__)


def defun_form(env: Environment, tail: list[SExpression]) -> LispValue:
    """
    (defun name [param... rest...] body...)
    Parameters are taken literally: 'p receives its argument unevaluated and
    a trailing p... collects the remaining arguments into a list.
    Redefining a name replaces the previous function.
    """
    if len(tail) < 2:
        raise CrispArgsMismatch("defun", "requires a name and a parameter list")

    name, params, *body = tail
    if not isinstance(name, Symbol):
        raise CrispArgsMismatch("defun", f"function name must be a symbol, got {name}")
    if not isinstance(params, List):
        raise CrispArgsMismatch("defun", f"parameter list must be [...], got {params}")

    formals: list[Symbol] = []
    for p in params:
        if not isinstance(p, Symbol):
            raise CrispArgsMismatch("defun", f"parameter must be a symbol, got {p}")
        formals.append(p)
    validate_params("defun", formals)

    fn = Defun(name.name, tuple(formals), tuple(body))
    env.add_function(name, fn)
    rest = fn.rest_param
    logger.debug(
        "defun %s: %d positional, rest %s",
        fn.name, len(formals) - (rest is not None), rest if rest is not None else "none",
    )
    return Nil
