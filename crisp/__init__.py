# Core type aliases for Crisp's data model.
# Values are a closed set: the Nil and T singletons, plain Python ints
# (bounded to 32 bits), and the frozen String/Symbol/Funcall/List classes.
# The same objects represent both code (forms) and runtime values.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, passed to the binder and dispatcher
EvaluatorFn = Callable[..., LispValue]
