"""
  Printer: S-expression -> text

- atoms print as their name
- proper lists print as (e1 e2 ... en)
- improper lists print as (e1 ... en . tail)
- nil prints as nil, never ()
- closures print as #<closure (lambda ...)>; their environment is never walked
"""

from __future__ import annotations

from io import StringIO

from forklisp import SExpression
from forklisp.errors import ForkLispTypeError
from forklisp.types.atom import Atom
from forklisp.types.closure import Closure
from forklisp.types.nil import is_nil
from forklisp.types.pair import Pair


def write(expr: SExpression, buffer: StringIO) -> None:
    if isinstance(expr, Atom):
        buffer.write(expr.name)
        return
    if isinstance(expr, Pair):
        buffer.write("(")
        write(expr.car, buffer)
        rest = expr.cdr
        while isinstance(rest, Pair):
            buffer.write(" ")
            write(rest.car, buffer)
            rest = rest.cdr
        if not is_nil(rest):
            buffer.write(" . ")
            write(rest, buffer)
        buffer.write(")")
        return
    if isinstance(expr, Closure):
        buffer.write(str(expr))
        return
    raise ForkLispTypeError(f"Cannot print non-S-expression {expr!r}")


def to_string(expr: SExpression) -> str:
    with StringIO() as buffer:
        write(expr, buffer)
        return buffer.getvalue()
