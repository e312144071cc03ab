from __future__ import annotations
import re
import sys


class Atom:
    """Leaf S-expression: an immutable name.

    Symbols, integers (as decimal text) and the literals nil/t are all atoms.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Atom({self.name!r})"

    def __str__(self):
        return self.name


_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_integer_name(name: str) -> bool:
    """Does the name read as a base-10 integer?"""
    return _INTEGER_RE.fullmatch(name) is not None


def is_integer(value: object) -> bool:
    return isinstance(value, Atom) and is_integer_name(value.name)
