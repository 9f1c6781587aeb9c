from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_catalog_path() -> Path:
    """Get the bundled sample catalog (ME-IR syllabus).

    Path from plar/config/settings.py to the package root:
    parent = plar/config/
    parent.parent = plar/
    """
    return Path(__file__).parent.parent / "data" / "catalogs" / "me_ir.yaml"


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="PLAR_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="PLAR_LOG_FILE",
        description="Optional log file path; console only when unset",
    )
    catalog_path: Path = Field(
        default_factory=get_default_catalog_path,
        validation_alias="PLAR_CATALOG_PATH",
        description="YAML syllabus catalog loaded at session start",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid PLAR_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("catalog_path")
    @classmethod
    def validate_catalog_path(cls, value: Path) -> Path:
        """Warn early when the configured catalog file does not exist."""
        if not value.exists():
            logger.warning(f"PLAR_CATALOG_PATH points to a missing file: {value}. Session creation from settings will fail.")
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
