"""
  Reader: lexer and recursive-descent parser

- Emits Atom and Pair values directly:

    - ( ... )  -> proper list of Pairs ending in nil
    - ()       -> nil
    - atoms    -> Atom (digits, letters and + - * / = > <)

- No dotted-pair, quote or string syntax.
- Malformed input raises ForkLispSyntaxError rather than producing a
  half-read tree.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from forklisp import SExpression
from forklisp.errors import ForkLispSyntaxError
from forklisp.types.atom import Atom
from forklisp.types.pair import from_iterable

logger = logging.getLogger(__name__)

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ+-*/=><"

TOKEN_RE = re.compile(
    r"[ \t\r\n]*("
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<atom>[0-9A-Za-z+\-*/=><]+)"
    r")"
)

WHITESPACE_RE = re.compile(r"[ \t\r\n]*")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise ForkLispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        for nm in ("lparen", "rparen", "atom"):
            if m.group(nm):
                yield nm, m.group(nm)
                break
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[SExpression]:
        """Parse one expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "atom":
            self.advance()
            return Atom(tok_val)

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type == "rparen":
                    self.advance()
                    break
                if next_type is None:
                    raise ForkLispSyntaxError("Unmatched '('")
                items.append(self.parse_expr())
            return from_iterable(items)

        raise ForkLispSyntaxError("Unexpected ')'")


def read(source: str) -> SExpression:
    """Read exactly one program from `source`."""
    stream = TokenStream(lex(source))
    try:
        expr = stream.parse_expr()
    except RecursionError:
        raise ForkLispSyntaxError("Program is nested too deeply to read") from None
    if expr is None:
        raise ForkLispSyntaxError("Empty program")
    tok_type, tok_val = stream.peek()
    if tok_type is not None:
        raise ForkLispSyntaxError(f"Unexpected {tok_val!r} after end of program")
    logger.debug("Read program: %s", expr)
    return expr
