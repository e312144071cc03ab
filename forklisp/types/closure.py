"""Closure representation and argument binding for forklisp."""

from __future__ import annotations

from io import StringIO

from forklisp import SExpression
from forklisp.errors import ForkLispArityError
from forklisp.types.environment import Environment, Frame
from forklisp.types.pair import length


class Closure:
    """A lambda expression paired with the environment it was evaluated in."""

    __slots__ = ("lambda_expr", "formals", "body", "env")

    def __init__(self, lambda_expr: SExpression, formals: SExpression, body: SExpression, env: Environment):
        self.lambda_expr = lambda_expr
        self.formals = formals
        self.body = body
        self.env = env

    def __str__(self) -> str:
        # The captured environment may be circular (letrec), so it is never printed.
        from forklisp.printer import to_string
        with StringIO() as buffer:
            buffer.write("#<closure ")
            buffer.write(to_string(self.lambda_expr))
            buffer.write(">")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: SExpression) -> Environment:
        """
        Bind the evaluated argument list positionally to this closure's formals
        and return the environment for evaluating the body.

        The new frame reuses both lists as-is; nothing is copied.
        """
        expected, provided = length(self.formals), length(args)
        if expected != provided:
            raise ForkLispArityError(
                f"Closure expects {expected} argument(s), got {provided}: {self}"
            )
        return self.env.extend(Frame(self.formals, args))
