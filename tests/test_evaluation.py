import pytest

from zenlisp.errors import (
    ZenArityError,
    ZenInvalidSymbol,
    ZenTypeError,
    ZenUnknownFunction,
    ZenUnknownInput,
)
from zenlisp.evaluation.evaluator import evaluate, evaluate_expression
from zenlisp.reader.parser import parse
from zenlisp.types.environment import Environment
from zenlisp.types.symbol import Symbol

# -----------------------------------------------------
# Atoms
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate_expression(1, env) == 1
    assert evaluate_expression(3.14, env) == 3.14
    assert evaluate_expression("hello", env) == "hello"
    assert evaluate_expression(True, env) is True
    assert evaluate_expression(None, env) is None


def test_unbound_symbol_quotes_itself(env):
    result = evaluate_expression(Symbol("High"), env)
    assert result == "High"
    assert type(result) is str


def test_symbol_lookup(env):
    env.define("x", 42)
    assert evaluate_expression(Symbol("x"), env) == 42


def test_string_literal_is_never_looked_up(run, env):
    env.define("x", 42)
    assert run('"x"') == "x"


def test_input_lookup(env):
    env.define("$a", 5)
    env.define("$b", 7)
    assert evaluate(parse("(+ $a $b)"), env) == 12


def test_unknown_input(run):
    with pytest.raises(ZenUnknownInput, match=r"Unknown input: \$unknownInput"):
        run("$unknownInput")


def test_evaluate_returns_last_value(run):
    assert run("1 2 (+ 1 2)") == 3


def test_evaluate_empty_program(run):
    assert run("") is None


def test_empty_list_is_null(run):
    assert run("()") is None


# -----------------------------------------------------
# Control flow and logic
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if (> 5 3) 10 20)", 10),
        ("(if (< 5 3) 10 20)", 20),
        ("(if null 1 2)", 2),
        ("(if 0 1 2)", 2),
        ('(if "" 1 2)', 2),
        ('(if "x" 1 2)', 1),
        ("(if (list) 1 2)", 1),
        ("(if {} 1 2)", 1),
        ("(and)", True),
        ("(and 1 true \"x\")", True),
        ("(and 1 0)", False),
        ("(or)", False),
        ("(or null false 3)", True),
        ("(or null false)", False),
        ("(not true)", False),
        ("(not null)", True),
        ("(not 0)", True),
    ]
)
def test_conditionals_and_logic(run, source, expected):
    assert run(source) == expected


def test_if_only_evaluates_taken_branch(run):
    assert run("(if true 1 (unknown))") == 1
    assert run("(if false (unknown) 2)") == 2


def test_and_or_short_circuit(run):
    assert run("(and false (unknown))") is False
    assert run("(or true (unknown))") is True


@pytest.mark.parametrize("source", ["(if true 1)", "(if true 1 2 3)", "(not)", "(not 1 2)"])
def test_control_arity(run, source):
    with pytest.raises(ZenArityError):
        run(source)


# -----------------------------------------------------
# Lists
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list 1 2 3)", [1, 2, 3]),
        ("(list)", []),
        ("(list (+ 1 1) \"a\" null)", [2, "a", None]),
        ("(car (list 1 2 3))", 1),
        ("(car (list))", None),
        ("(first (list 4 5))", 4),
        ("(cdr (list 1 2 3))", [2, 3]),
        ("(cdr (list))", []),
        ("(rest (list 4 5))", [5]),
        ("(concat (list 1 2) 3 (list 4))", [1, 2, 3, 4]),
        ("(concat)", []),
        ("(concat (list (list 1)) 2)", [[1], 2]),
        ("(length (list 1 2 3))", 3),
        ('(length "hello")', 5),
        ('(length "")', 0),
    ]
)
def test_list_operations(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(car 1)", '(cdr "abc")', "(length 5)", "(length {a 1})"])
def test_list_operation_type_errors(run, source):
    with pytest.raises(ZenTypeError):
        run(source)


@pytest.mark.parametrize("source", ["(car)", "(cdr (list 1) (list 2))", "(length)"])
def test_list_operation_arity(run, source):
    with pytest.raises(ZenArityError):
        run(source)


# -----------------------------------------------------
# set
# -----------------------------------------------------

def test_set_binds_and_returns(run, env):
    assert run("(set x 10)") == 10
    assert env.lookup("x") == 10
    assert run("(+ x 5)") == 15


def test_set_overwrites(run):
    assert run("(set x 1) (set x (+ x 1)) x") == 2


def test_set_arity(run):
    with pytest.raises(ZenArityError):
        run("(set x)")


def test_set_requires_a_name(run):
    with pytest.raises(ZenInvalidSymbol):
        run("(set 5 10)")


def test_set_accepts_string_literal_name(run, env):
    run('(set "y" 3)')
    assert env.lookup("y") == 3


# -----------------------------------------------------
# Dispatch
# -----------------------------------------------------

def test_unknown_function(run):
    with pytest.raises(ZenUnknownFunction, match="Unknown function or property: unknown"):
        run("(unknown 1 2)")


def test_non_name_operator(run):
    with pytest.raises(ZenTypeError, match="Invalid function call"):
        run("(1 2 3)")


def test_host_callable(run, env):
    env.define("double", lambda x: x * 2)
    assert run("(double 21)") == 42


def test_host_callable_takes_precedence_over_builtin(run, env):
    env.define("list", lambda *xs: "custom")
    assert run("(list 1 2)") == "custom"


def test_bound_non_callable_falls_back_to_builtin(run, env):
    env.define("list", 5)
    assert run("(list 1 2)") == [1, 2]
    assert run("list") == 5


def test_bound_non_callable_unknown_operator(run, env):
    env.define("x", 5)
    with pytest.raises(ZenUnknownFunction):
        run("(x 1)")


def test_environment_is_shared_between_evaluations(env):
    evaluate(parse("(set total 1)"), env)
    evaluate(parse("(set total (+ total 1))"), env)
    assert evaluate(parse("total"), env) == 2


def test_fresh_environment_sees_nothing():
    assert evaluate(parse("total"), Environment()) == "total"


def test_operand_that_defines_the_operator(run):
    # the operand runs first and binds `g`, so the call then applies it
    assert run("(g (defun (g x) (list x)))") == [None]
