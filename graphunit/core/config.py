"""Library configuration using Pydantic BaseSettings."""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from ``GRAPHUNIT_*`` environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="GRAPHUNIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ───────────────────────────────────────────────
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)

    # ── Matching ──────────────────────────────────────────────
    # Restrict candidate scans to nodes sharing a label with the expected node.
    LABEL_PRUNING: bool = True

    # Emit a debug event every N mappings checked (0 = off).
    PROGRESS_EVERY: int = 10000


settings = Settings()
