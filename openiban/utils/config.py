"""Application settings.

Pydantic-based configuration for the default validator, logging and metrics.
Supports environment variables and a local ``.env`` file.

Environment Variables:
- OPENIBAN_VALIDATION_METHOD: Default validation method, fast or strict (default: strict)
- OPENIBAN_REGISTRY_PATH: YAML country dataset replacing the built-in registry
- OPENIBAN_LOG_LEVEL: Logging level (default: WARNING)
- OPENIBAN_JSON_LOGS: Emit JSON logs (default: false)
- OPENIBAN_DEV_MODE: Colored console logs (default: true)
- OPENIBAN_METRICS_ENABLED: Expose Prometheus metrics (default: false)
- OPENIBAN_METRICS_PORT: Prometheus port (default: 8000)
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from openiban.validation.methods import ValidationMethod


class Settings(BaseSettings):
    """OpenIBAN configuration.

    Example:
        >>> settings = Settings()
        >>> settings.validation_method
        <ValidationMethod.STRICT: 'strict'>
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENIBAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Validation
    validation_method: ValidationMethod = Field(
        default=ValidationMethod.STRICT,
        description="Rule set used by the default validator",
    )

    registry_path: Path | None = Field(
        default=None,
        description="YAML country dataset; the built-in SWIFT registry is used when unset",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    json_logs: bool = Field(default=False, description="Output JSON logs")

    dev_mode: bool = Field(default=True, description="Development-friendly console logs")

    # Metrics
    metrics_enabled: bool = Field(default=False, description="Expose Prometheus metrics")

    metrics_port: int = Field(default=8000, ge=1, le=65535, description="Prometheus port")

    @field_validator("validation_method", mode="before")
    @classmethod
    def normalize_method(cls, v: object) -> object:
        """Accept method names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level choice."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got {v}")
        return v.upper()


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the application settings."""
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reload_settings() -> Settings:
    """Re-read settings from the environment."""
    global _settings

    _settings = Settings()
    return _settings
