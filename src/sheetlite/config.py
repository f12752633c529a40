"""Configuration management for sheetlite.

This module provides centralized configuration using pydantic-settings.
All options can be set via environment variables with the SHEETLITE_ prefix,
or via a .env file in the working directory.

Environment Variables:
    SHEETLITE_DATABASE_PATH: SQLite database file (default: sheetlite.db)
    SHEETLITE_SQLITE_TIMEOUT_SECONDS: Busy timeout for locked databases (default: 5.0)
    SHEETLITE_SQLITE_JOURNAL_MODE: SQLite journal mode (default: WAL)
    SHEETLITE_DEFAULT_SHEET_ROWS: Grid rows for sheets created on Google Sheets (default: 1000)
    SHEETLITE_DEFAULT_SHEET_COLS: Grid columns for sheets created on Google Sheets (default: 26)
    SHEETLITE_LOG_LEVEL: Logging level (default: INFO)
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

JOURNAL_MODES = ("DELETE", "TRUNCATE", "PERSIST", "MEMORY", "WAL", "OFF")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Example .env file:
        SHEETLITE_DATABASE_PATH=local-dev.db
        SHEETLITE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="SHEETLITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # SQLite Storage
    # =========================================================================

    database_path: str = "sheetlite.db"
    """Path of the SQLite file; ``:memory:`` keeps everything in process."""

    sqlite_timeout_seconds: float = 5.0
    """How long a write waits on a locked database before failing."""

    sqlite_journal_mode: str = "WAL"
    """Journal mode applied with PRAGMA journal_mode on connect."""

    # =========================================================================
    # Google Sheets
    # =========================================================================

    default_sheet_rows: int = 1000
    """Row count of worksheets created through the gspread driver."""

    default_sheet_cols: int = 26
    """Column count of worksheets created through the gspread driver."""

    # =========================================================================
    # Logging
    # =========================================================================

    log_level: str = "INFO"

    @field_validator("sqlite_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"sqlite_timeout_seconds must be positive, got {v}")
        return v

    @field_validator("sqlite_journal_mode")
    @classmethod
    def validate_journal_mode(cls, v: str) -> str:
        mode = v.strip().upper()
        if mode not in JOURNAL_MODES:
            raise ValueError(
                f"sqlite_journal_mode must be one of {', '.join(JOURNAL_MODES)}, got {v!r}"
            )
        return mode

    @field_validator("default_sheet_rows", "default_sheet_cols")
    @classmethod
    def validate_sheet_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"default sheet dimensions must be at least 1, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level

    @property
    def log_level_int(self) -> int:
        level: int = getattr(logging, self.log_level)
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
