from __future__ import annotations

import pytest

from config import Settings
from contracts import Add, Const, Div, Mul, Sub, Var
from exprrewriter import main, sample_expr


def test_sample_arith_is_one_plus_two_times_three():
    assert sample_expr("arith") == Add(
        left=Const(value=1), right=Mul(left=Const(value=2), right=Const(value=3))
    )
    assert sample_expr("vars").left == Var(name="x")
    assert isinstance(sample_expr("div-zero"), Div)
    assert isinstance(sample_expr("div-zero").right, Sub)


def test_demo_prints_original_and_rewritten(capsys):
    main(["demo"])

    out = capsys.readouterr().out
    assert "(1 + (2 * 3))" in out
    assert "Rewritten" in out
    assert "| 7" in out
    assert "| 42" in out


def test_demo_uses_constant_option(capsys):
    main(["demo", "--constant", "5"])

    out = capsys.readouterr().out
    assert "| 5" in out
    assert "| 42" not in out


def test_demo_reads_constant_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("EXPR_REWRITER_REWRITE_CONSTANT", "9")

    main(["demo"])

    assert "| 9" in capsys.readouterr().out


def test_demo_with_variables(capsys):
    main(["demo", "--sample", "vars", "--env", "x=4", "--env", "y=5"])

    out = capsys.readouterr().out
    assert "(x + (2 * y))" in out
    assert "| 14" in out
    # x + 42 * y
    assert "(x + (42 * y))" in out
    assert "| 214" in out


def test_demo_verbose_prints_pass_trace(capsys):
    main(["demo", "--verbose"])

    out = capsys.readouterr().out
    assert "constant_folding" in out
    assert "constant_rewriting" in out


def test_demo_without_passes_keeps_tree(capsys):
    main(["demo", "--no-fold", "--no-rewrite", "--verbose"])

    out = capsys.readouterr().out
    assert out.count("(1 + (2 * 3))") == 2
    assert "Passes [0]" in out


def test_demo_undefined_variable_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["demo", "--sample", "vars", "--env", "x=1"])

    assert exc_info.value.code == 1
    assert "Niezwiązana zmienna: 'y'" in capsys.readouterr().err


def test_demo_division_by_zero_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["demo", "--sample", "div-zero"])

    assert exc_info.value.code == 1
    assert "Dzielenie przez zero" in capsys.readouterr().err


def test_demo_rejects_malformed_binding():
    with pytest.raises(SystemExit) as exc_info:
        main(["demo", "--env", "x"])

    assert exc_info.value.code == 2


def test_settings_defaults_and_env_prefix(monkeypatch):
    assert Settings().max_expr_depth == 100

    monkeypatch.setenv("EXPR_REWRITER_MAX_EXPR_DEPTH", "50")
    monkeypatch.setenv("EXPR_REWRITER_LOG_LEVEL", "debug")

    settings = Settings()
    assert settings.max_expr_depth == 50
    assert settings.log_level == "debug"
