"""
Adapter: ExprRewriter
Pipeline passów przepisujących — passy stosowane w kolejności rejestracji,
wyjście jednego jest wejściem następnego.

Błąd dowolnego passu (np. DivisionByZeroError przy foldingu) przerywa
pipeline natychmiast i leci do wywołującego — brak częściowych wyników.
Limit głębokości sprawdzany jest na wejściu i po każdym passie (także
dla FunctionPass, który może zwrócić głębsze drzewo).
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.expr_tools import DEFAULT_MAX_DEPTH, check_depth
from contracts import Expr, PassTrace
from ports.rewriting_pass import RewritingPass

logger = logging.getLogger("expr_rewriter.pipeline")


def _pass_name(p: RewritingPass) -> str:
    return getattr(p, "name", None) or type(p).__name__


class ExprRewriter:
    """Uporządkowana sekwencja passów RewritingPass."""

    def __init__(self, *passes: RewritingPass, max_depth: Optional[int] = DEFAULT_MAX_DEPTH):
        self._passes: list[RewritingPass] = []
        self._max_depth = max_depth
        for p in passes:
            self.register(p)

    @property
    def passes(self) -> tuple[RewritingPass, ...]:
        return tuple(self._passes)

    def __len__(self) -> int:
        return len(self._passes)

    def register(self, rewriting_pass: RewritingPass) -> ExprRewriter:
        """Dodaje pass na koniec sekwencji; zwraca self (chaining)."""
        if not isinstance(rewriting_pass, RewritingPass):
            raise TypeError(
                f"Pass musi mieć metodę rewrite(expr), dostał {type(rewriting_pass).__name__}"
            )
        self._passes.append(rewriting_pass)
        logger.debug("Registered pass %s (#%d)", _pass_name(rewriting_pass), len(self._passes))
        return self

    def rewrite(self, expr: Expr) -> Expr:
        check_depth(expr, self._max_depth)
        for p in self._passes:
            logger.debug("Applying pass %s", _pass_name(p))
            expr = p.rewrite(expr)
            check_depth(expr, self._max_depth)
        return expr

    def trace(self, expr: Expr) -> list[PassTrace]:
        """Jak rewrite(), ale zapisuje (pass, przed, po) dla każdego passu."""
        check_depth(expr, self._max_depth)
        steps: list[PassTrace] = []
        for p in self._passes:
            name = _pass_name(p)
            logger.debug("Applying pass %s", name)
            rewritten = p.rewrite(expr)
            check_depth(rewritten, self._max_depth)
            steps.append(PassTrace(pass_name=name, before=expr, after=rewritten))
            expr = rewritten
        return steps

    def __repr__(self) -> str:
        names = ", ".join(_pass_name(p) for p in self._passes)
        return f"ExprRewriter([{names}])"
