# Core type aliases for forklisp's data model.
# Programs and runtime values share one representation: Atom and Pair from
# forklisp.types, plus Closure for evaluated lambda expressions.
#
# Naming guidance:
# - SExpression: use in reader/printer code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (often used interchangeably with LispValue)
SExpression = LispValue

# Evaluator function type used by special forms and argument strategies
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
