"""
Pipeline adapter package.

Public import:
    from adapters.pipeline import ExprRewriter
"""

from adapters.pipeline.expr_rewriter import ExprRewriter

__all__ = ["ExprRewriter"]
