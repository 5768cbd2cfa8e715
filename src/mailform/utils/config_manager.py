"""Configuration manager for persistent settings stored as JSON."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import (
    FileSystemError,
    InvalidConfigError,
    MissingConfigError,
)
from .logging import get_logger, log_call
from .paths import CONFIG_PATH

logger = get_logger(__name__)


class UIConfig(BaseModel):
    """Pydantic model for UI settings."""

    label_color: str = "#FF0687"
    hint_color: str = "#767676"
    placeholder_color: str = "#767676"
    error_color: str = "red"
    width: int = Field(default=50, ge=10)
    blink_interval: float = Field(default=0.53, gt=0)  # in seconds


class FormConfig(BaseModel):
    """Pydantic model for form field settings."""

    char_limit: int = Field(default=50, gt=0)
    placeholders: Dict[str, str] = Field(
        default_factory=lambda: {
            "to": "Enter to address here...",
            "from": "Enter from address here...",
            "subject": "Enter subject here...",
            "body": "Send a message...",
        }
    )
    clear_error_on_edit: bool = False


class LoggingConfig(BaseModel):
    """Pydantic model for logging settings."""

    log_level: str = "INFO"
    max_file_size: int = 5_242_880  # 5 MB
    backup_count: int = 5


class AppConfig(BaseModel):
    """Pydantic model for overall application configuration."""

    version: str = "0.1.0"
    ui: UIConfig = Field(default_factory=UIConfig)
    form: FormConfig = Field(default_factory=FormConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Loads, validates and persists the application configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        self.path = Path(config_path) if config_path else CONFIG_PATH
        self.config = self._load_or_create_config()
        logger.info(f"Configuration loaded from {self.path}")

    def _load_or_create_config(self) -> AppConfig:
        """Load configuration from file or create default if not present."""

        if not self.path.exists():
            logger.info("No config file found, creating default configuration.")
            config = AppConfig()
            self._save_config(config)
            return config

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            config = AppConfig(**data)
            logger.debug("Configuration successfully loaded and validated.")
            return config

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise InvalidConfigError(f"Configuration file is not valid JSON: {e}") from e
        except (ValidationError, TypeError) as e:
            logger.error(f"Failed to validate config file: {e}")
            raise InvalidConfigError(
                f"Configuration data does not match expected schema: {e}"
            ) from e
        except OSError as e:
            raise FileSystemError(f"Failed to read configuration file: {e}") from e

    def _save_config(self, config: Optional[AppConfig] = None) -> None:
        """Save the current configuration to file."""

        config = config or self.config

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
            logger.debug("Configuration successfully saved.")
        except OSError as e:
            raise FileSystemError(f"Failed to write configuration file: {e}") from e

    @log_call
    def set_config(self, key_path: str, value: Any, persist: bool = True) -> None:
        """Set a configuration value using a dot-separated key path."""

        keys = key_path.split(".")
        obj = self.config

        for key in keys[:-1]:
            if not isinstance(obj, BaseModel) or key not in type(obj).model_fields:
                raise MissingConfigError(
                    f"Configuration path '{key_path}' is invalid: '{key}' not found"
                )
            obj = getattr(obj, key)

        if not isinstance(obj, BaseModel) or keys[-1] not in type(obj).model_fields:
            raise MissingConfigError(
                f"Configuration key '{keys[-1]}' does not exist in path '{key_path}'"
            )

        try:
            updated = obj.model_validate({**obj.model_dump(), keys[-1]: value})
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid value for '{key_path}': {e}") from e

        setattr(obj, keys[-1], getattr(updated, keys[-1]))

        if persist:
            self._save_config()

        logger.info(f"Config key '{key_path}' updated.")

    @log_call
    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""

        logger.warning("Resetting configuration to default values.")
        self.config = AppConfig()
        self._save_config()
