"""
Rewriting pass adapter package.

Public import:
    from adapters.rewriting_pass import ConstantFoldingPass, ConstantRewritingPass, FunctionPass
"""

from adapters.rewriting_pass.constant_folding import ConstantFoldingPass
from adapters.rewriting_pass.constant_rewriting import ConstantRewritingPass
from adapters.rewriting_pass.function_pass import FunctionPass

__all__ = ["ConstantFoldingPass", "ConstantRewritingPass", "FunctionPass"]
