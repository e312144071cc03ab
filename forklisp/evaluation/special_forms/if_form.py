from forklisp import SExpression, EvaluatorFn
from forklisp.errors import ForkLispArityError
from forklisp.evaluation.arguments import ArgumentStrategy
from forklisp.types.environment import Environment
from forklisp.types.nil import is_nil
from forklisp.types.pair import to_list
from forklisp.types.tail_call import TailCall


def if_form(
    tail: SExpression,
    env: Environment,
    arguments: ArgumentStrategy,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    operands = to_list(tail)
    if len(operands) != 3:
        raise ForkLispArityError("if requires a condition, a then-expression and an else-expression")

    cond, consequent, alternative = operands
    # nil is the only false value
    if is_nil(evaluate_fn(cond, env, arguments)):
        return TailCall(alternative, env)
    return TailCall(consequent, env)
