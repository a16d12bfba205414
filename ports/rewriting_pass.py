"""
Port: RewritingPass
Odpowiedzialność: pojedyncza, czysta transformacja drzewa Expr → Expr.
"""
from typing import Protocol, runtime_checkable

from contracts import Expr


@runtime_checkable
class RewritingPass(Protocol):
    def rewrite(self, expr: Expr) -> Expr:
        """
        Returns a rewritten copy of expr; the input tree is never modified.
        Total over all Expr variants and referentially transparent.
        May raise ExprError subclasses (e.g. DivisionByZeroError while
        folding), which abort the enclosing pipeline.
        """
        ...
