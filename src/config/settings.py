# src/config/settings.py - v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for all deployment-specific settings. Every field
maps to the upper-cased env var of the same name (PROVIDER,
GOOGLE_API_KEY, CACHE_PATH, ...).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "production"] = "development"

    # === Analysis provider ===
    provider: Literal["mock", "google", "gemini", "openai"] = "mock"
    provider_timeout_s: float = 30.0
    preview_chars: int = 500
    max_reply_tokens: int = 500
    temperature: float = 0.2

    # Provider credentials / models
    google_api_key: str = ""
    google_model: str = "gemini-2.0-flash"
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"

    # Mock scores (0 = safe, 100 = maximum risk)
    mock_scam_score: int = 90
    mock_suspicious_score: int = 60
    mock_safe_score: int = 10

    # === Cache ===
    cache_enabled: bool = True
    cache_backend: Literal["json", "memory"] = "json"
    cache_path: Path = Path("data/cache.json")

    # === History ===
    history_path: Path = Path("data/history.json")

    # === HTTP server ===
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origin: str = "*"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.provider_timeout_s <= 0:
            errors.append("PROVIDER_TIMEOUT_S must be > 0")

        if self.preview_chars <= 0:
            errors.append("PREVIEW_CHARS must be > 0")

        for name in ("mock_scam_score", "mock_suspicious_score", "mock_safe_score"):
            if not 0 <= getattr(self, name) <= 100:
                errors.append(f"{name.upper()} must be within 0..100")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def resolved_provider(self) -> str:
        """Provider name with aliases folded (gemini -> google)."""
        return "google" if self.provider == "gemini" else self.provider

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins."""
        return [o.strip() for o in self.cors_origin.split(",") if o.strip()]


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
