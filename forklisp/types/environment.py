"""Runtime environment for forklisp.

An Environment is a chain of frames ("ribs"). Each frame holds two parallel
S-expression lists, names and values, matched by position. Lookup walks the
chain from the innermost frame outwards and takes the first positional match,
so inner bindings shadow outer ones.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from forklisp import LispValue, SExpression
from forklisp.errors import ForkLispFrameError, ForkLispUnboundSymbol
from forklisp.types.atom import Atom
from forklisp.types.nil import Nil
from forklisp.types.pair import Pair

_MISSING = object()


class Frame:
    """One binding scope: parallel lists of names and values."""

    __slots__ = ("names", "values", "_filled")

    def __init__(self, names: SExpression = Nil, values: SExpression = Nil):
        self.names: SExpression = names
        self.values: SExpression = values
        self._filled = True

    @classmethod
    def placeholder(cls) -> Frame:
        """An empty frame to be filled exactly once by `fill` (used by letrec)."""
        frame = cls()
        frame._filled = False
        return frame

    def fill(self, names: SExpression, values: SExpression) -> None:
        """Install the bindings of a placeholder frame.

        Closures built against this frame see the bindings from now on.
        Raises ForkLispFrameError if the frame was already filled.
        """
        if self._filled:
            raise ForkLispFrameError("Binding frame is already filled")
        self.names = names
        self.values = values
        self._filled = True

    def find(self, name: Atom) -> LispValue:
        names, values = self.names, self.values
        while isinstance(names, Pair) and isinstance(values, Pair):
            if names.car == name:
                return values.car
            names, values = names.cdr, values.cdr
        return _MISSING

    def _write(self, buffer: StringIO) -> None:
        buffer.write("{")
        names, values = self.names, self.values
        first = True
        while isinstance(names, Pair) and isinstance(values, Pair):
            if not first:
                buffer.write(", ")
            buffer.write(f"{names.car}: {values.car}")
            first = False
            names, values = names.cdr, values.cdr
        buffer.write("}")


class Environment:
    """Immutable link in a chain of frames."""

    __slots__ = ("frame", "outer")

    def __init__(self, frame: Frame, outer: Optional[Environment] = None):
        self.frame = frame
        self.outer = outer

    def extend(self, frame: Frame) -> Environment:
        """Return a new environment with `frame` pushed in front of this one."""
        return Environment(frame, self)

    def frames(self) -> Iterator[Frame]:
        env: Optional[Environment] = self
        while env is not None:
            yield env.frame
            env = env.outer

    def lookup(self, name: Atom) -> LispValue:
        """Look up the value bound to `name`.

        Raises ForkLispUnboundSymbol if no frame binds it.
        """
        for frame in self.frames():
            value = frame.find(name)
            if value is not _MISSING:
                return value
        raise ForkLispUnboundSymbol(f"No value for {name}")

    def __str__(self) -> str:
        """Innermost frame, with an indicator for the parent."""
        with StringIO() as buffer:
            self.frame._write(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for frame in self.frames():
                frame_buf = StringIO()
                frame._write(frame_buf)
                chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
