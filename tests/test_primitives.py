import logging

import pytest

from forklisp.builtin.primitives import PRIMITIVES, apply_primitive, lookup_primitive
from forklisp.errors import (
    ForkLispArityError,
    ForkLispIndexError,
    ForkLispNoPrimitive,
    ForkLispTypeError,
    ForkLispZeroDivision,
)
from forklisp.interpreter import run
from forklisp.types.atom import Atom
from forklisp.types.nil import Nil, T
from forklisp.types.pair import from_iterable


# -------------------------------
# Arithmetic and comparison
# -------------------------------
@pytest.mark.parametrize(
    "program, expected",
    [
        ("(+ 2 3)", "5"),
        ("(+ -2 3)", "1"),
        ("(- 2 5)", "-3"),
        ("(* -4 5)", "-20"),
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-3"),
        ("(/ 7 -2)", "-3"),
        ("(/ -7 -2)", "3"),
        ("(+ +1 1)", "2"),
        ("(* 123456789123456789 10)", "1234567891234567890"),
        ("(< 1 2)", "t"),
        ("(< 2 1)", "nil"),
        ("(> 3 -1)", "t"),
        ("(> 3 3)", "nil"),
    ]
)
def test_integer_primitives(interp, program, expected):
    assert interp.run(program) == expected


def test_division_by_zero(interp):
    with pytest.raises(ForkLispZeroDivision):
        interp.run("(/ 1 0)")


@pytest.mark.parametrize(
    "program",
    ["(+ (quote a) 1)", "(- 1 t)", "(* (quote (1)) 2)", "(< nil 1)", "(> 1 (lambda (x) x))"],
)
def test_arithmetic_rejects_non_integer_operands(interp, program):
    with pytest.raises(ForkLispTypeError):
        interp.run(program)


# -------------------------------
# Structure
# -------------------------------
@pytest.mark.parametrize(
    "program, expected",
    [
        ("(car (quote (a b)))", "a"),
        ("(cdr (quote (a b)))", "(b)"),
        ("(cdr (quote (a)))", "nil"),
        ("(cons 1 nil)", "(1)"),
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 (cons 2 3))", "(1 2 . 3)"),
        ("(cons (quote (a)) (quote (b)))", "((a) b)"),
        ("(1 (quote (a b c)))", "a"),
        ("(3 (quote (a b c)))", "c"),
    ]
)
def test_structure_primitives(interp, program, expected):
    assert interp.run(program) == expected


def test_car_and_cdr_of_atom_fail(interp):
    with pytest.raises(ForkLispTypeError):
        interp.run("(car (quote x))")
    with pytest.raises(ForkLispTypeError):
        interp.run("(cdr nil)")


def test_selector_past_end_of_list(interp):
    with pytest.raises(ForkLispIndexError):
        interp.run("(4 (quote (a b c)))")
    with pytest.raises(ForkLispIndexError):
        interp.run("(1 nil)")


# -------------------------------
# Predicates and logic
# -------------------------------
@pytest.mark.parametrize(
    "program, expected",
    [
        ("(atom 1)", "t"),
        ("(atom nil)", "t"),
        ("(atom (quote (1)))", "nil"),
        ("(atom (lambda (x) x))", "nil"),
        ("(null nil)", "t"),
        ("(null ())", "t"),
        ("(null 0)", "nil"),
        ("(not nil)", "t"),
        ("(not t)", "nil"),
        ("(not (quote (nil)))", "nil"),
        ("(and 1 2)", "2"),
        ("(and nil 2)", "nil"),
        ("(or 1 2)", "1"),
        ("(or nil 2)", "2"),
        ("(or nil nil)", "nil"),
        ("(== 1 1)", "t"),
        ("(== (quote a) (quote b))", "nil"),
        ("(== nil ())", "t"),
        ("(== 01 1)", "nil"),
    ]
)
def test_predicates(interp, program, expected):
    assert interp.run(program) == expected


def test_equality_of_lists_is_fatal(interp):
    with pytest.raises(ForkLispTypeError, match="== with lists"):
        interp.run("(== (quote (1)) (quote (1)))")


def test_and_or_do_not_short_circuit(capsys):
    assert run("(and nil (print (quote evaluated)))") == "nil"
    assert run("(or t (print (quote also)))") == "t"
    assert capsys.readouterr().out == "evaluated\nalso\n"


# -------------------------------
# Output
# -------------------------------
def test_print_writes_and_returns_argument(capsys):
    assert run("(print (cons 1 (quote (2 3))))") == "(1 2 3)"
    assert capsys.readouterr().out == "(1 2 3)\n"


def test_print_in_prog2(capsys):
    assert run("(prog2 (print 1) (print 2))") == "2"
    assert capsys.readouterr().out == "1\n2\n"


# -------------------------------
# Dispatch table
# -------------------------------
def test_apply_primitive_directly():
    args = from_iterable([Atom("a"), Nil])
    assert apply_primitive("cons", args) == from_iterable([Atom("a")])
    assert apply_primitive("null", from_iterable([Nil])) == T


def test_lookup_primitive_positive_integer_selector():
    arity, fn = lookup_primitive("2")
    assert arity == 1
    assert fn(from_iterable([Atom("x"), Atom("y")])) == Atom("y")


@pytest.mark.parametrize("name", ["0", "-1", "quote", "list", "prog2", "t"])
def test_lookup_primitive_unknown(name):
    with pytest.raises(ForkLispNoPrimitive):
        lookup_primitive(name)


@pytest.mark.parametrize("name", sorted(PRIMITIVES))
def test_primitive_arity_is_checked(name):
    arity, _ = PRIMITIVES[name]
    args = from_iterable([Atom("1")] * (arity + 1))
    with pytest.raises(ForkLispArityError):
        apply_primitive(name, args)


def test_primitive_failures_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="forklisp.builtin.primitives"):
        with pytest.raises(ForkLispNoPrimitive):
            apply_primitive("frobnicate", Nil)
        with pytest.raises(ForkLispArityError):
            apply_primitive("car", Nil)
    messages = [r.getMessage() for r in caplog.records]
    assert "No primitive named frobnicate" in messages
    assert "car called with 0 argument(s), expects 1" in messages
