"""
Adapter: FunctionPass
Opakowuje zwykłą funkcję Expr → Expr w port RewritingPass,
żeby można ją było zarejestrować w ExprRewriter.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from contracts import Expr


class FunctionPass:
    def __init__(self, fn: Callable[[Expr], Expr], name: Optional[str] = None):
        if not callable(fn):
            raise TypeError(f"FunctionPass wymaga funkcji, dostał {type(fn).__name__}")
        self._fn = fn
        self.name = name or getattr(fn, "__name__", "function_pass")

    def rewrite(self, expr: Expr) -> Expr:
        return self._fn(expr)

    def __repr__(self) -> str:
        return f"FunctionPass(name={self.name!r})"
