from __future__ import annotations

from forklisp import LispValue
from forklisp.types.atom import Atom


# Any atom named "nil" is nil; these are shared instances, not identities to test against.
Nil = Atom("nil")
T = Atom("t")


def is_nil(value: LispValue) -> bool:
    """nil is the only falsy value."""
    return isinstance(value, Atom) and value.name == "nil"


def truth(flag: bool) -> Atom:
    return T if flag else Nil
