"""Core evaluator and trampoline for forklisp.

`evaluate0` performs one step: it returns either a final value or a
TailCall naming the next expression and environment. `evaluate` loops over
those TailCalls, so `if`, `prog2`, the `letrec` body and closure calls run
in constant Python stack.
"""

from __future__ import annotations

from forklisp import SExpression, LispValue
from forklisp.errors import ForkLispTypeError
from forklisp.evaluation.apply import apply
from forklisp.evaluation.arguments import ArgumentStrategy, SequentialArguments
from forklisp.evaluation.special_forms import SPECIAL_FORMS
from forklisp.types.atom import Atom, is_integer_name
from forklisp.types.environment import Environment
from forklisp.types.pair import Pair
from forklisp.types.tail_call import TailCall

_SEQUENTIAL = SequentialArguments()


def evaluate(
    expr: SExpression, env: Environment, arguments: ArgumentStrategy | None = None
) -> LispValue:
    """
    Trampoline evaluator: tail-call aware evaluation.
    """
    if arguments is None:
        arguments = _SEQUENTIAL

    result = evaluate0(expr, env, arguments)
    while isinstance(result, TailCall):
        result = evaluate0(result.expr, result.env, arguments)
    return result


def evaluate0(
    expr: SExpression, env: Environment, arguments: ArgumentStrategy
) -> LispValue | TailCall:
    """
    Single evaluation step. Returns either a value or a TailCall.
    """
    if isinstance(expr, Atom):
        # Integers evaluate to themselves; every other atom is a variable.
        if is_integer_name(expr.name):
            return expr
        return env.lookup(expr)

    if isinstance(expr, Pair):
        head = expr.car
        if isinstance(head, Atom):
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                return form(expr.cdr, env, arguments, evaluate)
        return apply(arguments.evaluate_all(expr, env, evaluate))

    raise ForkLispTypeError(f"Cannot evaluate {expr!r}")
