from crisp.types.nil import Nil, NilType, T, TType, wrap_bool
from crisp.types.symbol import Quote, Symbol
from crisp.types.values import (
    INTEGER_MAX,
    INTEGER_MIN,
    Funcall,
    List,
    String,
    in_integer_range,
    is_integer,
    is_nil,
)
from crisp.types.function import Defun, Function, Native
from crisp.types.environment import Closure, Environment

__all__ = [
    "Nil", "NilType", "T", "TType", "wrap_bool",
    "Quote", "Symbol",
    "INTEGER_MAX", "INTEGER_MIN", "Funcall", "List", "String",
    "in_integer_range", "is_integer", "is_nil",
    "Defun", "Function", "Native",
    "Closure", "Environment",
]
