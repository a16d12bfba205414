"""
Adapter: ConstantRewritingPass
Implementuje port RewritingPass — każdy Const dostaje tę samą wartość.

Węzły binarne są przebudowywane z przepisanymi dziećmi, Var zostaje bez zmian.
"""
from __future__ import annotations

import logging
from typing import Optional

from typing_extensions import assert_never

from adapters.expr_tools import DEFAULT_MAX_DEPTH, check_depth, with_children
from contracts import Add, Const, Div, Expr, Mul, Sub, Var

logger = logging.getLogger("expr_rewriter.constant_rewriting")


class ConstantRewritingPass:
    name = "constant_rewriting"

    def __init__(self, constant_value: int, max_depth: Optional[int] = DEFAULT_MAX_DEPTH):
        if isinstance(constant_value, bool) or not isinstance(constant_value, int):
            raise TypeError(f"constant_value musi być int, nie {type(constant_value).__name__}")
        self.constant_value = constant_value
        self._max_depth = max_depth

    def rewrite(self, expr: Expr) -> Expr:
        check_depth(expr, self._max_depth)
        logger.debug("Rewriting %s", expr)
        return self._rewrite(expr)

    def _rewrite(self, expr: Expr) -> Expr:
        if isinstance(expr, Const):
            return Const(value=self.constant_value)

        if isinstance(expr, Var):
            return expr

        if isinstance(expr, (Add, Sub, Mul, Div)):
            return with_children(expr, self._rewrite(expr.left), self._rewrite(expr.right))

        assert_never(expr)

    def __repr__(self) -> str:
        return f"ConstantRewritingPass(constant_value={self.constant_value})"
