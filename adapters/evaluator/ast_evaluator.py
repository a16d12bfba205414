"""
Adapter: ASTEvaluator
Implementuje port Evaluator — rekurencyjne przejście drzewa Expr.

Kolejność: lewy operand, potem prawy — przy dwóch błędach wygrywa lewy.
Brak efektów ubocznych i logowania; wynik zależy tylko od drzewa i env.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from typing_extensions import assert_never

from adapters.arithmetic import apply_binary
from adapters.expr_tools import DEFAULT_MAX_DEPTH, check_depth
from contracts import (
    Add,
    Const,
    Div,
    Expr,
    Mul,
    Sub,
    UndefinedVariableError,
    Var,
)


class ASTEvaluator:
    """Dokładny ewaluator całkowitoliczbowych drzew Expr."""

    def __init__(self, max_depth: Optional[int] = DEFAULT_MAX_DEPTH):
        self._max_depth = max_depth

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(
        self,
        expr: Expr,
        env: Optional[Mapping[str, int]] = None,
    ) -> int:
        check_depth(expr, self._max_depth)
        return self._eval(expr, env if env is not None else {})

    # -- Prywatne ----------------------------------------------------------

    def _eval(self, node: Expr, env: Mapping[str, int]) -> int:
        if isinstance(node, Const):
            return node.value

        if isinstance(node, Var):
            if node.name not in env:
                raise UndefinedVariableError(node.name)
            return env[node.name]

        if isinstance(node, (Add, Sub, Mul, Div)):
            left_val = self._eval(node.left, env)
            right_val = self._eval(node.right, env)
            return apply_binary(node, left_val, right_val)

        assert_never(node)
