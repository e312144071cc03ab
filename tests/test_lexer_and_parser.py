import re
import sys

import pytest
from hypothesis import given, strategies as st

from forklisp.errors import ForkLispSyntaxError
from forklisp.printer import to_string
from forklisp.reader.parser import ALPHABET, TokenStream, lex, read
from forklisp.types.atom import Atom
from forklisp.types.nil import Nil
from forklisp.types.pair import from_iterable


def _list(*items):
    return from_iterable(items)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ("(+ 1 -2)", [("lparen", "("), ("atom", "+"), ("atom", "1"), ("atom", "-2"), ("rparen", ")")]),
        (" \t\r\n(==)\n", [("lparen", "("), ("atom", "=="), ("rparen", ")")]),
        ("((x))", [("lparen", "("), ("lparen", "("), ("atom", "x"), ("rparen", ")"), ("rparen", ")")]),
        ("a1<b>", [("atom", "a1<b>")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize("source", ["'a", "(a . b)", '"str"', "a;b", "[a]"])
def test_lexer_rejects_characters_outside_alphabet(source):
    with pytest.raises(ForkLispSyntaxError):
        list(lex(source))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("()", Nil),
        ("123", Atom("123")),
        ("-45", Atom("-45")),
        ("(a b c)", _list(Atom("a"), Atom("b"), Atom("c"))),
        ("(a (b c) ())", _list(Atom("a"), _list(Atom("b"), Atom("c")), Nil)),
        ("  (quote\n(1 2 3))  ", _list(Atom("quote"), _list(Atom("1"), Atom("2"), Atom("3")))),
    ]
)
def test_read(source, expected):
    assert read(source) == expected


def test_token_stream_parses_successive_expressions():
    stream = TokenStream(lex("a (b) c"))
    assert stream.parse_expr() == Atom("a")
    assert stream.parse_expr() == _list(Atom("b"))
    assert stream.parse_expr() == Atom("c")
    assert stream.parse_expr() is None


@pytest.mark.parametrize(
    "source, message",
    [
        ("", "Empty program"),
        ("   \n", "Empty program"),
        ("(a (b)", "Unmatched"),
        (")", "Unexpected ')'"),
        ("(a) b", "after end of program"),
        ("(a))", "after end of program"),
    ]
)
def test_read_errors(source, message):
    with pytest.raises(ForkLispSyntaxError, match=re.escape(message)):
        read(source)


def test_nested_lists_are_proper():
    tree = read("((a b) (c d))")
    assert tree.car == _list(Atom("a"), Atom("b"))
    assert tree.cdr.car == _list(Atom("c"), Atom("d"))
    assert tree.cdr.cdr == Nil


atoms = st.text(alphabet=ALPHABET, min_size=1, max_size=8).map(Atom)
trees = st.recursive(
    atoms,
    lambda children: st.lists(children, max_size=4).map(from_iterable),
    max_leaves=25,
)


@given(trees)
def test_print_then_read_round_trips(tree):
    assert read(to_string(tree)) == tree


def test_deeply_nested_program_is_a_syntax_error():
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(1000)
    try:
        with pytest.raises(ForkLispSyntaxError, match="nested too deeply"):
            read("(quote " + "(" * 5000 + ")" * 5000 + ")")
    finally:
        sys.setrecursionlimit(previous)
