"""Configuration file loading and validation."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import LOG_FILE_DEFAULT, WEB_HOST_DEFAULT, WEB_PORT_DEFAULT
from .errors import ConfigException

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogConfig(BaseModel):
    """Logging configuration."""

    file: str = LOG_FILE_DEFAULT
    level: str = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = str(v).upper()
        if v not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: '{v}'. Supported levels: {', '.join(LOG_LEVELS)}"
            )
        return v


class OutputConfig(BaseModel):
    """JSON output configuration."""

    indent: int = Field(default=2, ge=0)
    by_alias: bool = True


class WebConfig(BaseModel):
    """Web service configuration."""

    host: str = Field(default=WEB_HOST_DEFAULT)
    port: int = Field(default=WEB_PORT_DEFAULT, ge=1, le=65535)


class Config(BaseSettings):
    """Application configuration."""

    log: LogConfig = Field(default_factory=LogConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    model_config = SettingsConfigDict(
        env_prefix="SPECFORM_",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> "Config":
        """Load configuration from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        class _Config(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix="SPECFORM_",
                env_nested_delimiter="__",
            )

        try:
            return _Config()
        except ValidationError as e:
            raise ConfigException(format_validation_error(e)) from e
        except ValueError as e:
            # tomllib.TOMLDecodeError
            raise ConfigException(f"Invalid TOML in {config_path}: {e}") from e

    @classmethod
    def load_or_default(cls, config_path: str, default_path: str) -> "Config":
        """Load configuration, falling back to defaults when the default file is absent."""
        if config_path == default_path and not Path(config_path).exists():
            logger.debug(f"No configuration file at {config_path}, using defaults")
            try:
                return cls()
            except ValidationError as e:
                raise ConfigException(format_validation_error(e)) from e
        return cls.load_from_file(config_path)


def format_validation_error(e: ValidationError) -> str:
    error_lines = ["Configuration validation failed:"]
    for error in e.errors():
        loc = " -> ".join(str(item) for item in error["loc"])
        error_lines.append(f"  - {loc}: {error['msg']}")
    return "\n".join(error_lines)
