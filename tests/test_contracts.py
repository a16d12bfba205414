from __future__ import annotations

import typing

import pytest
from pydantic import ValidationError

from contracts import (
    BINARY_VARIANTS,
    EXPR_VARIANTS,
    Add,
    Const,
    Div,
    DivisionByZeroError,
    Expr,
    ExprError,
    ExpressionTooDeepError,
    Mul,
    PassTrace,
    Sub,
    UndefinedVariableError,
    Var,
)


def test_expr_union_has_exactly_six_variants():
    union, _discriminator = typing.get_args(Expr)

    assert set(typing.get_args(union)) == set(EXPR_VARIANTS)
    assert len(EXPR_VARIANTS) == 6
    assert set(BINARY_VARIANTS) == {Add, Sub, Mul, Div}


def test_structural_equality_and_hash():
    a = Add(left=Const(value=1), right=Mul(left=Const(value=2), right=Const(value=3)))
    b = Add(left=Const(value=1), right=Mul(left=Const(value=2), right=Const(value=3)))

    assert a == b
    assert hash(a) == hash(b)
    assert a is not b


def test_same_fields_different_variant_are_not_equal():
    assert Add(left=Const(value=1), right=Const(value=2)) != Sub(
        left=Const(value=1), right=Const(value=2)
    )


def test_nodes_are_immutable():
    node = Const(value=1)

    with pytest.raises(ValidationError):
        node.value = 2

    assert node.value == 1


def test_const_rejects_non_integer_values():
    with pytest.raises(ValidationError):
        Const(value="1")
    with pytest.raises(ValidationError):
        Const(value=1.5)
    with pytest.raises(ValidationError):
        Const(value=True)


def test_var_rejects_non_string_name():
    with pytest.raises(ValidationError):
        Var(name=1)


def test_repr_shows_tag_and_fields():
    text = repr(Add(left=Const(value=1), right=Var(name="x")))

    assert text.startswith("Add(")
    assert "Const(" in text
    assert "value=1" in text
    assert "name='x'" in text


def test_str_renders_infix_form():
    expr = Add(left=Const(value=1), right=Mul(left=Const(value=2), right=Var(name="x")))

    assert str(expr) == "(1 + (2 * x))"
    assert str(Div(left=Const(value=-7), right=Sub(left=Var(name="a"), right=Const(value=2)))) == "(-7 / (a - 2))"


def test_errors_share_base_and_builtin_types():
    undefined = UndefinedVariableError("x")
    div_zero = DivisionByZeroError(Div(left=Const(value=1), right=Const(value=0)))
    too_deep = ExpressionTooDeepError(10, 5)

    assert isinstance(undefined, ExprError) and isinstance(undefined, ValueError)
    assert isinstance(div_zero, ExprError) and isinstance(div_zero, ZeroDivisionError)
    assert isinstance(too_deep, ExprError) and isinstance(too_deep, RecursionError)
    assert undefined.name == "x"
    assert "(1 / 0)" in str(div_zero)
    assert (too_deep.depth, too_deep.max_depth) == (10, 5)


def test_pass_trace_reports_change():
    same = PassTrace(pass_name="noop", before=Const(value=1), after=Const(value=1))
    changed = PassTrace(pass_name="rw", before=Const(value=1), after=Const(value=42))

    assert not same.changed
    assert changed.changed
