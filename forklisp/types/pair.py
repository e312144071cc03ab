"""Pairs (cons cells) and helpers for walking pair chains.

Pairs are never mutated after construction, so sub-lists may be shared
freely between expressions, values and threads.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from forklisp import LispValue, SExpression
from forklisp.errors import ForkLispTypeError
from forklisp.types.nil import Nil, is_nil


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: SExpression, cdr: SExpression):
        self.car = car
        self.cdr = cdr

    def __eq__(self, other: object) -> bool:
        # Walk the spine iteratively; only the cars recurse.
        a, b = self, other
        while isinstance(a, Pair):
            if not isinstance(b, Pair):
                return False
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return a == b

    __hash__ = None

    def __str__(self) -> str:
        from forklisp.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return f"<Pair {self}>"


def from_iterable(items: Iterable[LispValue], tail: SExpression = Nil) -> SExpression:
    """Build a list from Python items, ending in `tail` (nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(expr: SExpression) -> Iterator[LispValue]:
    """Yield the elements of a proper list.

    Raises ForkLispTypeError on an improper tail.
    """
    while isinstance(expr, Pair):
        yield expr.car
        expr = expr.cdr
    if not is_nil(expr):
        raise ForkLispTypeError(f"Expected a proper list, found tail {expr}")


def to_list(expr: SExpression) -> list[LispValue]:
    return list(iter_list(expr))


def length(expr: SExpression) -> int:
    n = 0
    while isinstance(expr, Pair):
        n += 1
        expr = expr.cdr
    return n