"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
(prefixed with ``I18N_EXTRACTOR_``) and provides type-safe access
throughout the extractor.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

OUTPUT_MODES = ("overwrite", "dump")


class Settings(BaseSettings):
    """Extractor settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables, a .env file, or CLI options.
    """

    model_config = SettingsConfigDict(
        env_prefix="I18N_EXTRACTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Catalog
    locale: str = Field(
        default="en",
        description="Top-level namespace of the translation catalog.",
    )
    locale_dir: Path = Field(
        default=Path("config/locales"),
        description="Directory holding <locale>.yml catalogs.",
    )
    yaml_file: Path | None = Field(
        default=None,
        description="Explicit catalog file. Defaults to <locale_dir>/<locale>.yml.",
    )
    views_dir: Path = Field(
        default=Path("app/views"),
        description="Templates root used to derive catalog scopes.",
    )

    # Templates
    output_mode: str = Field(
        default="overwrite",
        description="How rewritten templates are persisted: 'overwrite' or 'dump'.",
    )
    interactive: bool = Field(
        default=False,
        description="Prompt for every proposed replacement.",
    )
    tag_file: Path = Field(
        default=Path(".i18n-extractor-tags"),
        description="Append-only list of lines tagged to be left as-is.",
    )

    # Keys
    key_max_length: int = Field(
        default=40,
        ge=8,
        description="Maximum length of the slug part of generated keys.",
    )
    translate_helper: str = Field(
        default="t",
        description="Helper name used in generated key references.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Optional directory for info.log / error.log.",
    )
    debug: bool = Field(
        default=False,
        description="Log every finder decision (forces DEBUG level).",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    @field_validator("output_mode")
    @classmethod
    def validate_output_mode(cls, v: str) -> str:
        """Only the known persistence modes are accepted."""
        v = v.lower()
        if v not in OUTPUT_MODES:
            raise ValueError(f"output_mode must be one of {OUTPUT_MODES}, got {v!r}")
        return v

    @property
    def catalog_path(self) -> Path:
        """Resolved catalog file location."""
        return self.yaml_file or self.locale_dir / f"{self.locale}.yml"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    def configure_logging(self) -> None:
        """Configure structlog and stdlib logging based on settings."""
        import structlog

        level = getattr(logging, self.effective_log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.format_exc_info,
                structlog.processors.KeyValueRenderer(key_order=["event", "path"]),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next call reloads the environment."""
    global _settings
    _settings = None
