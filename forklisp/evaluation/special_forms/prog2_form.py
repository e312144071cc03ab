from forklisp import SExpression, EvaluatorFn
from forklisp.errors import ForkLispArityError
from forklisp.evaluation.arguments import ArgumentStrategy
from forklisp.types.environment import Environment
from forklisp.types.pair import to_list
from forklisp.types.tail_call import TailCall


def prog2_form(
    tail: SExpression,
    env: Environment,
    arguments: ArgumentStrategy,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    operands = to_list(tail)
    if len(operands) != 2:
        raise ForkLispArityError("prog2 expects exactly 2 arguments")
    first, second = operands
    evaluate_fn(first, env, arguments)
    return TailCall(second, env)
