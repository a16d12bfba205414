"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wartości drzewa Expr.
"""
from collections.abc import Mapping
from typing import Optional, Protocol, runtime_checkable

from contracts import Expr


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(
        self,
        expr: Expr,
        env: Optional[Mapping[str, int]] = None,
    ) -> int:
        """
        Evaluates an expression tree to an integer.
        env: variable bindings for Var resolution (read-only, None = empty).
        Operands are evaluated left then right; integer division truncates
        toward zero.
        Raises UndefinedVariableError for names missing from env.
        Raises DivisionByZeroError when a divisor evaluates to zero.
        Raises ExpressionTooDeepError when the tree exceeds the depth limit.
        """
        ...
