"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from ``ENV_CREATOR_*`` environment
variables and provides type-safe access throughout the application.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from env_creator.strategies.locators import DEFAULT_SKIP_DIRS, DEFAULT_TEMPLATE_NAMES
from env_creator.strategies.template_engine.processor import DEFAULT_PLACEHOLDER_TOKENS

logger = logging.getLogger(__name__)

EDITOR_TYPES = ("prompt", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have defaults matching the standard behavior and can be
    overridden via ``ENV_CREATOR_`` prefixed environment variables. List
    settings take JSON (e.g., ``ENV_CREATOR_SKIP_DIRS='["node_modules", "vendor"]'``).
    """

    model_config = SettingsConfigDict(
        env_prefix="ENV_CREATOR_",
        case_sensitive=False,
        extra="ignore",
    )

    # Discovery
    template_names: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEMPLATE_NAMES),
        description="File names recognized as environment templates.",
    )
    skip_dirs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SKIP_DIRS),
        description="Directory names never searched (hidden directories are always skipped).",
    )

    # Output
    target_name: str = Field(
        default=".env",
        description="Name of the generated file, created next to the template.",
    )
    ignore_file_name: str = Field(
        default=".gitignore",
        description="Ignore-rules file at the workspace root.",
    )

    # Placeholder detection
    placeholder_tokens: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PLACEHOLDER_TOKENS),
        description="Substrings that mark a value as a placeholder.",
    )
    placeholder_case_insensitive: bool = Field(
        default=False,
        description="Match placeholder tokens regardless of case.",
    )

    # Editor
    editor_type: str = Field(
        default="prompt",
        description="Editor strategy: 'prompt' (one prompt per placeholder) or 'none'.",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that receives detailed logs.",
    )

    @field_validator("template_names")
    @classmethod
    def require_template_names(cls, v: list[str]) -> list[str]:
        """Reject an empty template allow-list."""
        if not v:
            raise ValueError("template_names must contain at least one name")
        return v

    @field_validator("editor_type")
    @classmethod
    def check_editor_type(cls, v: str) -> str:
        """Normalize and validate the editor strategy name."""
        v = v.lower()
        if v not in EDITOR_TYPES:
            raise ValueError(f"editor_type must be one of {', '.join(EDITOR_TYPES)}")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure structlog to render through the stdlib loggers."""
        import structlog

        level = getattr(logging, self.log_level, logging.WARNING)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.KeyValueRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
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
