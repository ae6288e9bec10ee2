"""Configuration management for Pomotodo CLI."""

import json
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import (
    BaseModel,
    Field,
    ValidationError as PydanticValidationError,
    field_validator,
)

from pomotodo_cli.utils.logger import get_logger

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Keys whose default is None and may be set back to None
NULLABLE_KEYS = frozenset({"storage.data_file"})


class TimerConfig(BaseModel):
    """Pomodoro timer configuration."""

    work_minutes: int = Field(default=25, ge=1)
    break_minutes: int = Field(default=5, ge=1)
    tick_seconds: float = Field(default=1.0, gt=0)

    @property
    def work_ticks(self) -> int:
        return self.work_minutes * 60

    @property
    def break_ticks(self) -> int:
        return self.break_minutes * 60


class StorageConfig(BaseModel):
    """Task file configuration."""

    data_file: Optional[str] = Field(default=None)


class UIConfig(BaseModel):
    """UI configuration."""

    notice_ticks: int = Field(default=4, ge=1)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return level


class Config(BaseModel):
    """Main configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages Pomotodo CLI configuration."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("pomotodo-cli"))
        self.config_file = self.config_dir / f"{profile}.json"

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file, falling back to defaults if corrupted."""
        if not self.config_file.exists():
            return Config()
        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Config(**data)
        except (OSError, json.JSONDecodeError, TypeError, PydanticValidationError) as e:
            get_logger().warning(
                "Ignoring unreadable config %s: %s", self.config_file, e
            )
            return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key."""
        keys = key.split(".")
        if self.get(key) is None and key not in NULLABLE_KEYS:
            raise KeyError(f"Unknown configuration key '{key}'")

        config_dict = self.config.model_dump()
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration (or a single key) to defaults."""
        if key is None:
            self._config = Config()
            self.save_config()
        else:
            self.set(key, self.get_from_config(Config(), key))

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager
