"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

_CONFIG_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime and importer configuration.

    Environment variable names map directly to field names in uppercase.
    Example: `log_level` reads from `LOG_LEVEL`. List values are read as JSON,
    for example `STORABLE_TYPE_MODULES='["shop.types"]'`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Minimum structured log level.
        log_json_output: Whether log events are rendered as JSON lines.
        api_max_payload_bytes: Maximum accepted import request body size.
        storable_type_modules: Modules loaded into the type registry at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    log_json_output: bool = Field(default=False)
    api_max_payload_bytes: int = Field(default=1_048_576, gt=0)
    storable_type_modules: list[str] = Field(default_factory=list)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in _CONFIG_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_CONFIG_LOG_LEVELS)}")
        return normalized_value

    @field_validator("storable_type_modules")
    @classmethod
    def _validate_type_modules(cls, value: list[str]) -> list[str]:
        normalized_values = [module_name.strip() for module_name in value]
        if any(not module_name for module_name in normalized_values):
            raise ValueError("storable_type_modules entries must not be blank")
        return normalized_values


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except (ValidationError, SettingsError) as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
