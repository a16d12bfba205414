#!/usr/bin/env python3
"""
exprrewriter.py — CLI demonstracyjne ExprRewriter.

Buduje przykładowe drzewo, liczy je, przepuszcza przez pipeline
[ConstantFoldingPass, ConstantRewritingPass(N)] i liczy wynik ponownie.

Konfiguracja: zmienne środowiskowe z prefiksem EXPR_REWRITER_
lub plik .env (np. EXPR_REWRITER_REWRITE_CONSTANT=7).

Podkomendy:
    demo   — uruchom pipeline na przykładowym drzewie

Użycie:
    python exprrewriter.py demo
    python exprrewriter.py demo --constant 7 --verbose
    python exprrewriter.py demo --sample vars --env x=4 --env y=5
    python exprrewriter.py demo --sample div-zero
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.pipeline import ExprRewriter
from adapters.rewriting_pass import ConstantFoldingPass, ConstantRewritingPass
from config import Settings
from contracts import Add, Const, Div, Expr, ExprError, Mul, PassTrace, Sub, Var

logger = logging.getLogger("expr_rewriter")


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _short(value: Any, limit: int = 64) -> str:
    s = str(value).replace("\n", " ").strip()
    if len(s) <= limit:
        return s
    return s[: limit - 3] + "..."


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(key, str(value))
    _console().print(table)


def _print_trace_table(steps: list[PassTrace]) -> None:
    table = Table(title=f"Passes [{len(steps)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Pass", no_wrap=True, style="cyan")
    table.add_column("Before")
    table.add_column("After")
    table.add_column("Changed", justify="center", no_wrap=True)
    for idx, step in enumerate(steps, 1):
        table.add_row(
            str(idx),
            step.pass_name,
            _short(step.before, 48),
            _short(step.after, 48),
            "yes" if step.changed else "no",
        )
    _console().print(table)


def _parse_binding(raw: str) -> tuple[str, int]:
    name, sep, value = raw.partition("=")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"oczekiwano NAME=VALUE, dostano {raw!r}")
    try:
        return name, int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"wartość {name!r} musi być liczbą całkowitą: {value!r}")


# -- samples ---------------------------------------------------------------

def sample_expr(sample: str) -> Expr:
    if sample == "arith":
        # 1 + 2 * 3
        return Add(left=Const(value=1), right=Mul(left=Const(value=2), right=Const(value=3)))
    if sample == "vars":
        # x + 2 * y
        return Add(left=Var(name="x"), right=Mul(left=Const(value=2), right=Var(name="y")))
    if sample == "div-zero":
        # 10 / (2 - 2)
        return Div(left=Const(value=10), right=Sub(left=Const(value=2), right=Const(value=2)))
    raise ValueError(f"Nieznana próbka: {sample!r}")


# -- commands --------------------------------------------------------------

def _demo(args: argparse.Namespace, settings: Settings) -> None:
    constant = settings.rewrite_constant if args.constant is None else args.constant
    env = dict(args.env)

    rewriter = ExprRewriter(max_depth=settings.max_expr_depth)
    if not args.no_fold:
        rewriter.register(ConstantFoldingPass(max_depth=settings.max_expr_depth))
    if not args.no_rewrite:
        rewriter.register(ConstantRewritingPass(constant, max_depth=settings.max_expr_depth))

    evaluator = ASTEvaluator(max_depth=settings.max_expr_depth)
    expr = sample_expr(args.sample)

    rows: list[tuple[str, Any]] = [("Original", expr)]
    rows.append(("Result", evaluator.evaluate(expr, env)))

    steps = rewriter.trace(expr)
    rewritten = steps[-1].after if steps else expr
    rows.append(("Rewritten", rewritten))
    rows.append(("Result", evaluator.evaluate(rewritten, env)))

    _print_kv_table("ExprRewriter demo", rows)
    if args.verbose:
        _print_trace_table(steps)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="exprrewriter",
        description="ExprRewriter — ewaluator i pipeline passów dla drzew wyrażeń",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # demo
    p = sub.add_parser("demo", help="Uruchom pipeline na przykładowym drzewie")
    p.add_argument("--sample", default="arith", choices=["arith", "vars", "div-zero"])
    p.add_argument("--env", action="append", default=[], type=_parse_binding,
                   metavar="NAME=VALUE", help="Wartość zmiennej (można powtarzać)")
    p.add_argument("--constant", type=int, default=None,
                   help="Wartość dla ConstantRewritingPass (domyślnie z konfiguracji)")
    p.add_argument("--no-fold", action="store_true", help="Pomiń ConstantFoldingPass")
    p.add_argument("--no-rewrite", action="store_true", help="Pomiń ConstantRewritingPass")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="Pokaż tabelę z przebiegiem każdego passu")

    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    if args.command == "demo":
        try:
            _demo(args, settings)
        except ExprError as exc:
            logger.debug("Demo failed", exc_info=True)
            print(f"Błąd: {exc}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
