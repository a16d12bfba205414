"""
Arytmetyka całkowita wspólna dla ewaluatora i ConstantFoldingPass.

Dzielenie obcina w stronę zera (-7 / 2 == -3), a nie w stronę -inf jak
operator // w Pythonie. Dzielnik 0 → DivisionByZeroError.
"""
from __future__ import annotations

from typing import Optional

from typing_extensions import assert_never

from contracts import Add, BinaryExpr, Div, DivisionByZeroError, Mul, Sub


def truncating_div(a: int, b: int, expr: Optional[BinaryExpr] = None) -> int:
    if b == 0:
        raise DivisionByZeroError(expr)
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def apply_binary(node: BinaryExpr, a: int, b: int) -> int:
    """Liczy a <op> b, gdzie op wynika z typu węzła."""
    if isinstance(node, Add):
        return a + b
    if isinstance(node, Sub):
        return a - b
    if isinstance(node, Mul):
        return a * b
    if isinstance(node, Div):
        return truncating_div(a, b, node)
    assert_never(node)
