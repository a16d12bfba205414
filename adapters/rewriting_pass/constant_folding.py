"""
Adapter: ConstantFoldingPass
Implementuje port RewritingPass — constant folding od liści do korzenia.

Najpierw przepisywane są dzieci; jeśli oba bezpośrednie dzieci węzła
binarnego są wtedy Const, węzeł zwija się do jednego Const z wynikiem.
Div(Const(a), Const(0)) → DivisionByZeroError (tak samo jak w ewaluatorze).
Drzewo po foldingu jest punktem stałym: rewrite(rewrite(e)) == rewrite(e).
"""
from __future__ import annotations

import logging
from typing import Optional

from typing_extensions import assert_never

from adapters.arithmetic import apply_binary
from adapters.expr_tools import DEFAULT_MAX_DEPTH, check_depth, with_children
from contracts import Add, Const, Div, Expr, Mul, Sub, Var

logger = logging.getLogger("expr_rewriter.constant_folding")


class ConstantFoldingPass:
    name = "constant_folding"

    def __init__(self, max_depth: Optional[int] = DEFAULT_MAX_DEPTH):
        self._max_depth = max_depth

    def rewrite(self, expr: Expr) -> Expr:
        check_depth(expr, self._max_depth)
        logger.debug("Folding %s", expr)
        return self._rewrite(expr)

    def _rewrite(self, expr: Expr) -> Expr:
        if isinstance(expr, (Const, Var)):
            return expr

        if isinstance(expr, (Add, Sub, Mul, Div)):
            left = self._rewrite(expr.left)
            right = self._rewrite(expr.right)
            if isinstance(left, Const) and isinstance(right, Const):
                return Const(value=apply_binary(expr, left.value, right.value))
            return with_children(expr, left, right)

        assert_never(expr)
