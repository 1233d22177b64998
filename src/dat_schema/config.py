"""Configuration management for dat-schema.

This module provides a pydantic-based configuration system that loads settings
from environment variables (prefixed with `DAT_SCHEMA_`) or a `.env` file.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Configuration settings for dat-schema.

    Environment Variables:
        DAT_SCHEMA_SCHEMA_DIR: Directory scanned when no paths are given
        DAT_SCHEMA_FILE_PATTERN: Glob used to collect schema files from a directory
        DAT_SCHEMA_MAX_WORKERS: Threads used to resolve tables and enumerations
        DAT_SCHEMA_LOG_LEVEL: Log level installed by the CLI

    Example:
        >>> config = Config()
        >>> config.file_pattern
        '*.graphql'
    """

    model_config = SettingsConfigDict(
        env_prefix="DAT_SCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    schema_dir: Path = Field(
        default=Path("."),
        description="Directory scanned for schema files when no paths are given",
    )

    file_pattern: str = Field(
        default="*.graphql",
        description="Glob pattern of schema files inside a directory",
    )

    max_workers: int = Field(
        default=1,
        ge=1,
        description="Worker threads for resolution, 1 resolves sequentially",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level used by the command-line interface",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def __repr__(self) -> str:
        return (
            f"Config("
            f"schema_dir={str(self.schema_dir)!r}, "
            f"file_pattern={self.file_pattern!r}, "
            f"max_workers={self.max_workers!r}, "
            f"log_level={self.log_level!r}"
            f")"
        )


def load_config() -> Config:
    """Load configuration from environment variables.

    Returns:
        A Config instance with settings loaded from environment.
    """
    return Config()
