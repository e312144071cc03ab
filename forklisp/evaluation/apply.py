"""Application engine for forklisp.

Receives the fully evaluated call list `(function arg1 arg2 ...)`:
- an atom names a primitive and is applied immediately;
- a closure extends its captured environment with the arguments and hands
  its body back to the trampoline as a TailCall;
- anything else is an illegal function.
"""

from forklisp import LispValue, SExpression
from forklisp.builtin.primitives import apply_primitive
from forklisp.errors import ForkLispTypeError
from forklisp.types.atom import Atom
from forklisp.types.closure import Closure
from forklisp.types.tail_call import TailCall


def apply(call: SExpression) -> LispValue | TailCall:
    fn, args = call.car, call.cdr
    if isinstance(fn, Atom):
        return apply_primitive(fn.name, args)
    if isinstance(fn, Closure):
        return TailCall(fn.body, fn.extend_env(args))
    raise ForkLispTypeError(f"Illegal function {fn}")
