"""Configuration Management for toggl-client

Handles loading and validation of client configuration. Supports hierarchical
YAML files with environment variable overrides.
"""

import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, SecretStr, field_validator

from ..api.authentication import API_SECRET, USER_AGENT
from .error_handler import ConfigurationError
from .logging_manager import LoggingManager


class APIConfig(BaseModel):
    """Configuration for the Toggl API connection."""
    token: Optional[SecretStr] = None
    secret: SecretStr = Field(default=SecretStr(API_SECRET))
    user_agent: str = Field(default=USER_AGENT, min_length=1)
    timeout: Optional[float] = Field(default=None, gt=0)
    verify_ssl: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_to_console: bool = Field(default=True)
    file_path: Optional[str] = None
    max_file_size_mb: int = Field(default=10, ge=1, le=1024)
    backup_count: int = Field(default=5, ge=1, le=20)

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        """Accept lower-case level names"""
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Main client configuration."""
    environment: str = Field(default="development")
    api: APIConfig = Field(default_factory=APIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Resource name -> URL, replacing the default Toggl URL for that resource
    endpoints: Dict[str, str] = Field(default_factory=dict)

    model_config = {'validate_assignment': True}


class ConfigManager:
    """Manages configuration loading and validation."""

    ENV_PREFIX = "TOGGL_"
    ENV_NAME_VARIABLE = "TOGGL_ENV"

    def __init__(self, config_path: Optional[Path] = None, environment: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional directory holding the configuration files
            environment: Environment name, selects ``<environment>.yaml``
        """
        self.config_base_path = Path(config_path) if config_path else self._get_default_config_path()
        self.environment = environment or os.getenv(self.ENV_NAME_VARIABLE, 'development')
        self._config: Optional[AppConfig] = None
        self._lock = threading.Lock()
        self.logger = LoggingManager.get_logger(__name__)

        self.config_files = self._get_config_files()

    def _get_default_config_path(self) -> Path:
        """Get the default configuration directory."""
        config_locations = [
            Path("config"),
            Path.home() / ".toggl_client",
        ]

        for location in config_locations:
            if location.exists() and location.is_dir():
                return location

        return Path("config")

    def _get_config_files(self) -> Dict[str, Path]:
        """Get configuration file paths for hierarchical loading."""
        base_dir = self.config_base_path

        return {
            'default': base_dir / 'default_config.yaml',
            'environment': base_dir / f'{self.environment}.yaml',
            'local': base_dir / 'local.yaml'
        }

    @property
    def config(self) -> AppConfig:
        return self.load_config()

    def load_config(self) -> AppConfig:
        """Load and validate configuration with hierarchical overrides.

        Files are merged in the order default, environment, local, then
        ``TOGGL_<SECTION>_<KEY>`` environment variables are applied.

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a file cannot be parsed or validation fails
        """
        with self._lock:
            if self._config:
                return self._config

            config_data: Dict[str, Any] = {}

            for config_type, config_file in self.config_files.items():
                if config_file.exists():
                    self.logger.info(f"Loading {config_type} config from {config_file}")
                    self._deep_merge(config_data, self._load_yaml_file(config_file))

            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.info(f"Applying environment overrides: {sorted(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            config_data.setdefault('environment', self.environment)

            try:
                self._config = AppConfig(**config_data)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e

            return self._config

    def reload_config(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._config = None
        return self.load_config()

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        try:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Environment variables follow pattern: TOGGL_<SECTION>_<KEY>
        Example: TOGGL_API_USER_AGENT -> api.user_agent

        Values stay strings, pydantic coerces them to the field types.
        """
        overrides: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX) or key == self.ENV_NAME_VARIABLE:
                continue

            section, _, field = key[len(self.ENV_PREFIX):].lower().partition('_')
            if not section or not field:
                continue

            overrides.setdefault(section, {})[field] = value

        return overrides

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Recursively merge nested dictionaries."""
        for key, value in update_dict.items():
            if isinstance(value, dict) and key in base_dict and isinstance(base_dict[key], dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value
