from forklisp import SExpression
from forklisp.types.environment import Environment


class TailCall:
    """Trampoline signal: continue evaluating `expr` in `env`."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
