"""
contracts.py — Jedyne źródło prawdy dla typów danych ExprRewriter.
Wszystkie moduły importują drzewa wyrażeń i błędy WYŁĄCZNIE stąd.

Expr to zamknięta unia sześciu wariantów (Const, Var, Add, Sub, Mul, Div).
Węzły są niemutowalne (frozen) — każda transformacja buduje nowe drzewo.
"""
from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


# ─────────────────────────── Errors ──────────────────────────────────────

class ExprError(Exception):
    """Base class for all expression evaluation and rewriting failures."""


class UndefinedVariableError(ExprError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Niezwiązana zmienna: {name!r}")


class DivisionByZeroError(ExprError, ZeroDivisionError):
    def __init__(self, expr: Optional[Expr] = None):
        self.expr = expr
        if expr is None:
            super().__init__("Dzielenie przez zero")
        else:
            super().__init__(f"Dzielenie przez zero w {expr}")


class ExpressionTooDeepError(ExprError, RecursionError):
    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Drzewo wyrażenia za głębokie: {depth} > {max_depth}"
        )


# ─────────────────────────── Expr AST ────────────────────────────────────

class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class Const(_Node):
    node_type: Literal["const"] = "const"
    value: StrictInt

    def __str__(self) -> str:
        return str(self.value)


class Var(_Node):
    node_type: Literal["var"] = "var"
    name: StrictStr

    def __str__(self) -> str:
        return self.name


class Add(_Node):
    symbol: ClassVar[str] = "+"
    node_type: Literal["add"] = "add"
    left: Expr
    right: Expr

    def __str__(self) -> str:
        return render(self)


class Sub(_Node):
    symbol: ClassVar[str] = "-"
    node_type: Literal["sub"] = "sub"
    left: Expr
    right: Expr

    def __str__(self) -> str:
        return render(self)


class Mul(_Node):
    symbol: ClassVar[str] = "*"
    node_type: Literal["mul"] = "mul"
    left: Expr
    right: Expr

    def __str__(self) -> str:
        return render(self)


class Div(_Node):
    symbol: ClassVar[str] = "/"
    node_type: Literal["div"] = "div"
    left: Expr
    right: Expr

    def __str__(self) -> str:
        return render(self)


Expr = Annotated[
    Union[Const, Var, Add, Sub, Mul, Div],
    Field(discriminator="node_type"),
]
BinaryExpr = Union[Add, Sub, Mul, Div]

Add.model_rebuild()
Sub.model_rebuild()
Mul.model_rebuild()
Div.model_rebuild()

# Zamknięty zbiór wariantów — kolejność jak w unii Expr
EXPR_VARIANTS: tuple[type[_Node], ...] = (Const, Var, Add, Sub, Mul, Div)
BINARY_VARIANTS: tuple[type[_Node], ...] = (Add, Sub, Mul, Div)


def render(expr: Expr) -> str:
    """Zapis infiksowy z pełnymi nawiasami, np. (1 + (2 * 3)).
    Iteracyjnie (jawny stos) — nie zużywa ramek proporcjonalnie do głębokości.
    """
    parts: list[str] = []
    stack: list[Union[Expr, str]] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Const):
            parts.append(str(item.value))
        elif isinstance(item, Var):
            parts.append(item.name)
        else:
            stack.extend((")", item.right, f" {item.symbol} ", item.left, "("))
    return "".join(parts)


# ─────────────────────────── Pipeline ────────────────────────────────────

class PassTrace(BaseModel):
    model_config = ConfigDict(frozen=True)

    pass_name: str
    before: Expr
    after: Expr

    @property
    def changed(self) -> bool:
        return self.before != self.after
