"""Configuration management using pydantic-settings."""
import logging
import sys
from functools import lru_cache
from typing import Any, List, Literal

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ImporterSettings(BaseSettings):
    """Importer settings loaded from environment variables.

    All settings prefixed with EXCEL_IMPORT_ (e.g., EXCEL_IMPORT_MAX_FILE_SIZE_MB=10)
    """

    # Source Guards
    max_file_size_mb: int = Field(
        default=30,
        ge=1,
        le=1024,
        description="Maximum spreadsheet size in MB (on disk and uncompressed)"
    )
    supported_extensions: List[str] = Field(
        default_factory=lambda: [".xls", ".xlsx"],
        description="File extensions accepted as spreadsheet sources"
    )

    # Binding Policy
    strict_headers: bool = Field(
        default=False,
        description="Raise on duplicate header labels instead of keeping the last column"
    )
    require_all_fields: bool = Field(
        default=False,
        description="Raise when a record field has no matching column"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment (production switches to JSON logs)"
    )
    configure_logging: bool = Field(
        default=True,
        description="Configure structlog on first import call; disable when the host app owns logging"
    )

    model_config = SettingsConfigDict(
        env_prefix="EXCEL_IMPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('supported_extensions')
    @classmethod
    def normalize_extensions(cls, v: List[str]) -> List[str]:
        """Lowercase extensions and make sure each starts with a dot."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith('.') else f".{ext}")
        if not normalized:
            raise ValueError('supported_extensions must contain at least one extension')
        return normalized

    @property
    def max_file_size_bytes(self) -> int:
        """Size ceiling in bytes."""
        return self.max_file_size_mb * 1024 * 1024

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> ImporterSettings:
    """Return the cached settings instance."""
    return ImporterSettings()


def configure_logging(settings: ImporterSettings) -> None:
    """Configure structlog: JSON in production, colored console otherwise."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    shared_processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_production:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
