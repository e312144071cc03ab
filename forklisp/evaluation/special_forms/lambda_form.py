from forklisp import SExpression, LispValue, EvaluatorFn
from forklisp.errors import ForkLispArityError, ForkLispTypeError
from forklisp.types.atom import Atom, is_integer
from forklisp.types.closure import Closure
from forklisp.types.environment import Environment
from forklisp.types.pair import Pair, iter_list, to_list

LAMBDA = Atom("lambda")


def lambda_form(
    tail: SExpression, env: Environment, arguments, evaluate_fn: EvaluatorFn
) -> LispValue:
    # (lambda (params) body): exactly one body expression.
    operands = to_list(tail)
    if len(operands) != 2:
        raise ForkLispArityError("lambda requires a parameter list and a single body")

    formals, body = operands
    for formal in iter_list(formals):
        if not isinstance(formal, Atom) or is_integer(formal):
            raise ForkLispTypeError(f"Invalid lambda parameter {formal}")

    return Closure(Pair(LAMBDA, tail), formals, body, env)
