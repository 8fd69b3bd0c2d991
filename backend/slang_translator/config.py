"""
Slang Translator Backend — Application Configuration
======================================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the routes and the logging setup.
When:  Loaded once at module import time; validated before app starts.

Design Decision:
    The record set itself is NOT configuration. Only the location of the
    source document lives here; the ingested catalog is built in the app
    lifespan and handed to routes explicitly.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local development.
    Attributes are grouped by concern for readability.
    """

    # ── Data Source ───────────────────────────────────────────────────────
    # What: Markdown document ingested once at startup
    # Format: `## term` headings followed by Definition/Usage/Cultural sections
    data_path: str = Field(
        default="data/slang.md",
        description="Path to the markdown document holding the slang terms",
    )

    # ── Browse Pagination ─────────────────────────────────────────────────
    # What: Page size used when the client omits `limit`
    default_page_limit: int = Field(default=10, ge=1, le=100)

    # What: Upper bound on `limit` for GET /api/browse; larger values are clamped
    # Why: A single request should never serialize the whole catalog by accident
    max_page_limit: int = Field(default=100, ge=1, le=1000)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATA_PATH and data_path both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
