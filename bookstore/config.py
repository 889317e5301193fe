"""
Bookstore Backend — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the password module and Alembic.
When:  Loaded once at module import time. Tests build their own `Settings`
       instances and hand them to `create_app()`.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: sqlite+aiosqlite:///<path>; relative paths resolve against the CWD
    database_url: str = Field(
        default="sqlite+aiosqlite:///./app.db",
        description="Async SQLAlchemy connection URL",
    )

    # Insert the three catalog books and the sample review on first start
    seed_database: bool = Field(default=True)

    # ── File Storage ──────────────────────────────────────────────────────
    # Uploaded images land here; served back under /uploads/<name>
    upload_dir: str = Field(default="./uploads")

    # ── Security ──────────────────────────────────────────────────────────
    # bcrypt work factor. 12 in production; tests lower it to keep hashing fast.
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated origins; "*" allows any client (the mobile app has no fixed origin)
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1024, le=65535)

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

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
    }


# Singleton instance: the default configuration for `bookstore.main:app`
settings = Settings()
