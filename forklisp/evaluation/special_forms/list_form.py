from forklisp import SExpression, LispValue, EvaluatorFn
from forklisp.evaluation.arguments import ArgumentStrategy
from forklisp.types.environment import Environment


def list_form(
    tail: SExpression,
    env: Environment,
    arguments: ArgumentStrategy,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # Not a tail position: the operands are evaluated with the run's strategy.
    return arguments.evaluate_all(tail, env, evaluate_fn)
