"""letrec: mutually recursive bindings.

The new frame is pushed empty, every binding expression is evaluated against
the extended environment (so lambdas there close over the frame itself), and
only then is the frame filled. Closures built during the loop therefore see
every name of the group once they are called.
"""

import logging

from forklisp import SExpression, EvaluatorFn
from forklisp.errors import ForkLispArityError, ForkLispTypeError
from forklisp.evaluation.arguments import ArgumentStrategy
from forklisp.types.atom import Atom, is_integer
from forklisp.types.environment import Environment, Frame
from forklisp.types.nil import Nil
from forklisp.types.pair import Pair, iter_list, to_list
from forklisp.types.tail_call import TailCall

logger = logging.getLogger(__name__)


def letrec_form(
    tail: SExpression,
    env: Environment,
    arguments: ArgumentStrategy,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    operands = to_list(tail)
    if len(operands) != 2:
        raise ForkLispArityError("letrec requires a binding list and a single body")
    bindings, body = operands

    frame = Frame.placeholder()
    new_env = env.extend(frame)

    # Binding values are computed in order on this thread; the frame stays
    # empty until all of them are done.
    names: SExpression = Nil
    values: SExpression = Nil
    for binding in iter_list(bindings):
        parts = to_list(binding) if isinstance(binding, Pair) else []
        if len(parts) != 2 or not isinstance(parts[0], Atom) or is_integer(parts[0]):
            raise ForkLispTypeError(f"Malformed letrec binding {binding}")
        name, value_expr = parts
        value = evaluate_fn(value_expr, new_env, arguments)
        # Prepending leaves the frame in reverse declaration order.
        names = Pair(name, names)
        values = Pair(value, values)

    frame.fill(names, values)
    logger.debug("letrec frame filled: %s", frame.names)
    return TailCall(body, new_env)
