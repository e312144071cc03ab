from forklisp import SExpression, LispValue, EvaluatorFn
from forklisp.errors import ForkLispArityError
from forklisp.types.environment import Environment
from forklisp.types.pair import to_list


def quote_form(
    tail: SExpression, env: Environment, arguments, evaluate_fn: EvaluatorFn
) -> LispValue:
    operands = to_list(tail)
    if len(operands) != 1:
        raise ForkLispArityError("quote expects exactly 1 argument")
    return operands[0]
