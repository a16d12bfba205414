"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks EXPR_REWRITER_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "WARNING"

    # Limit głębokości drzewa (rekurencja ewaluatora i passów)
    max_expr_depth: int = 100

    # ConstantRewritingPass w pipeline demo
    rewrite_constant: int = 42

    model_config = SettingsConfigDict(env_prefix="EXPR_REWRITER_", env_file=".env", extra="ignore")
