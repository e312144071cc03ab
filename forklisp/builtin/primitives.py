"""Primitive operations for the forklisp runtime.

Primitives receive already-evaluated arguments: nothing here short-circuits,
`and`/`or` included. A single table maps each primitive name to its arity
and handler; any positive integer name is a 1-based list selector.
"""
from __future__ import annotations

import functools
import logging
import operator
import sys
from typing import Callable

from forklisp import LispValue, SExpression
from forklisp.errors import (
    ForkLispArityError,
    ForkLispIndexError,
    ForkLispNoPrimitive,
    ForkLispTypeError,
    ForkLispZeroDivision,
)
from forklisp.printer import to_string
from forklisp.types.atom import Atom, is_integer, is_integer_name
from forklisp.types.environment import Environment, Frame
from forklisp.types.nil import is_nil, truth
from forklisp.types.pair import Pair, from_iterable, to_list

logger = logging.getLogger(__name__)

PrimitiveFn = Callable[..., LispValue]

# Names bound to themselves in the global frame.
GLOBAL_NAMES = (
    "t", "nil", "car", "cdr", "cons", "atom", "null",
    "+", "-", "*", "/", "==", ">", "<",
    "not", "and", "or", "list", "prog2", "print",
)


# -------------------------------
# Structure
# -------------------------------
def car(value: LispValue) -> LispValue:
    if not isinstance(value, Pair):
        raise ForkLispTypeError(f"car of non-pair {value}")
    return value.car


def cdr(value: LispValue) -> LispValue:
    if not isinstance(value, Pair):
        raise ForkLispTypeError(f"cdr of non-pair {value}")
    return value.cdr


def cons(first: LispValue, rest: LispValue) -> Pair:
    return Pair(first, rest)


def select(index: int, value: LispValue) -> LispValue:
    """(n lst) => the n-th element of lst, counting from 1."""
    rest = value
    for _ in range(index - 1):
        if not isinstance(rest, Pair):
            break
        rest = rest.cdr
    if not isinstance(rest, Pair):
        raise ForkLispIndexError(f"No element {index} in {value}")
    return rest.car


# -------------------------------
# Predicates and logic
# -------------------------------
def atom(value: LispValue) -> Atom:
    return truth(isinstance(value, Atom))


def null(value: LispValue) -> Atom:
    return truth(is_nil(value))


def logical_and(first: LispValue, second: LispValue) -> LispValue:
    return first if is_nil(first) else second


def logical_or(first: LispValue, second: LispValue) -> LispValue:
    return second if is_nil(first) else first


def equals(first: LispValue, second: LispValue) -> Atom:
    if not isinstance(first, Atom) or not isinstance(second, Atom):
        raise ForkLispTypeError(f"== with lists: {first}, {second}")
    return truth(first.name == second.name)


# -------------------------------
# Arithmetic
# -------------------------------
def _int_operand(name: str, value: LispValue) -> int:
    if not is_integer(value):
        raise ForkLispTypeError(f"{name} expects integer operands, got {value}")
    return int(value.name)


def _truncating_div(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise ForkLispZeroDivision("Division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _arithmetic(name: str, op: Callable[[int, int], int]) -> PrimitiveFn:
    def apply_op(first: LispValue, second: LispValue) -> Atom:
        return Atom(str(op(_int_operand(name, first), _int_operand(name, second))))
    apply_op.__name__ = f"arith_{op.__name__}"
    return apply_op


def _comparison(name: str, op: Callable[[int, int], bool]) -> PrimitiveFn:
    def compare(first: LispValue, second: LispValue) -> Atom:
        return truth(op(_int_operand(name, first), _int_operand(name, second)))
    compare.__name__ = f"compare_{op.__name__}"
    return compare


# -------------------------------
# Output
# -------------------------------
def print_builtin(value: LispValue) -> LispValue:
    """Write the printed form of value on its own line and return value."""
    # Single write call: concurrent prints may reorder but never split a line.
    sys.stdout.write(to_string(value) + "\n")
    return value


PRIMITIVES: dict[str, tuple[int, PrimitiveFn]] = {
    "car": (1, car),
    "cdr": (1, cdr),
    "atom": (1, atom),
    "null": (1, null),
    "not": (1, null),
    "print": (1, print_builtin),
    "cons": (2, cons),
    "and": (2, logical_and),
    "or": (2, logical_or),
    "==": (2, equals),
    "+": (2, _arithmetic("+", operator.add)),
    "-": (2, _arithmetic("-", operator.sub)),
    "*": (2, _arithmetic("*", operator.mul)),
    "/": (2, _arithmetic("/", _truncating_div)),
    "<": (2, _comparison("<", operator.lt)),
    ">": (2, _comparison(">", operator.gt)),
}


def lookup_primitive(name: str) -> tuple[int, PrimitiveFn]:
    """Resolve a primitive name to (arity, handler).

    Raises ForkLispNoPrimitive for anything that is neither in the table
    nor a positive integer.
    """
    entry = PRIMITIVES.get(name)
    if entry is not None:
        return entry
    if is_integer_name(name) and int(name) > 0:
        return 1, functools.partial(select, int(name))
    logger.debug("No primitive named %s", name)
    raise ForkLispNoPrimitive(f"Couldn't apply primitive {name}")


def apply_primitive(name: str, args: SExpression) -> LispValue:
    """Apply the primitive called `name` to the evaluated argument list `args`."""
    arity, fn = lookup_primitive(name)
    values = to_list(args)
    if len(values) != arity:
        logger.debug("%s called with %d argument(s), expects %d", name, len(values), arity)
        raise ForkLispArityError(
            f"{name} expects {arity} argument(s), got {len(values)}"
        )
    return fn(*values)


def global_environment() -> Environment:
    """Build the global environment: every name in it is bound to itself."""
    names = from_iterable(Atom(n) for n in GLOBAL_NAMES)
    return Environment(Frame(names, names))
