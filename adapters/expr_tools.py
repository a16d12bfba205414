"""
Narzędzia strukturalne dla drzew Expr.

children()       — bezpośrednie poddrzewa węzła
with_children()  — nowy węzeł binarny tego samego typu z nowymi dziećmi
expr_depth()     — głębokość drzewa (iteracyjnie, bez rekurencji)
check_depth()    — rzuca ExpressionTooDeepError powyżej limitu

Każda funkcja dyspatchująca po wariantach kończy się assert_never —
dodanie siódmego wariantu do Expr zostanie wychwycone przez type checker.
"""
from __future__ import annotations

from typing import Optional

from typing_extensions import assert_never

from contracts import (
    Add,
    BinaryExpr,
    Const,
    Div,
    Expr,
    ExpressionTooDeepError,
    Mul,
    Sub,
    Var,
)

# repr/hash/== modeli pydantic zużywają do ~5 ramek na poziom; domyślny limit CPython = 1000
DEFAULT_MAX_DEPTH = 100


def children(expr: Expr) -> tuple[Expr, ...]:
    if isinstance(expr, (Const, Var)):
        return ()
    if isinstance(expr, (Add, Sub, Mul, Div)):
        return (expr.left, expr.right)
    assert_never(expr)


def with_children(node: BinaryExpr, left: Expr, right: Expr) -> BinaryExpr:
    """Buduje nowy węzeł typu `node` — wejście nie jest modyfikowane."""
    if isinstance(node, Add):
        return Add(left=left, right=right)
    if isinstance(node, Sub):
        return Sub(left=left, right=right)
    if isinstance(node, Mul):
        return Mul(left=left, right=right)
    if isinstance(node, Div):
        return Div(left=left, right=right)
    assert_never(node)


def expr_depth(expr: Expr) -> int:
    """Liczba poziomów drzewa; liść ma głębokość 1."""
    depth = 0
    stack: list[tuple[Expr, int]] = [(expr, 1)]
    while stack:
        node, level = stack.pop()
        depth = max(depth, level)
        stack.extend((child, level + 1) for child in children(node))
    return depth


def check_depth(expr: Expr, max_depth: Optional[int]) -> None:
    if max_depth is None:
        return
    depth = expr_depth(expr)
    if depth > max_depth:
        raise ExpressionTooDeepError(depth, max_depth)
