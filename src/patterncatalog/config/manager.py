"""Configuration manager - layered, validated access to application settings."""
from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from patterncatalog.config.defaults import DEFAULT_CONFIG, ENV_OVERRIDES
from patterncatalog.config.schemas import AppConfig, validate_config
from patterncatalog.config.utils.env_expansion import expand_config_env_vars
from patterncatalog.domain.base.exceptions import ConfigurationError
from patterncatalog.infrastructure.logging.logger import get_logger


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into a copy of base, recursing into nested dictionaries."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigurationManager:
    """
    Configuration manager.

    Configuration is assembled in layers, later layers winning:
    - built-in defaults
    - an optional JSON configuration file
    - environment variable overrides (PATTERNS_*)

    String values may reference environment variables as $VAR or ${VAR}.
    The result is validated into an AppConfig.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager."""
        self._config_file = config_file
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None
        self.logger = get_logger(__name__)

    @property
    def config_file(self) -> Optional[str]:
        """Get the configuration file path, if any."""
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Get validated application configuration (lazy loaded)."""
        if self._app_config is None:
            self._app_config = self._load_app_config()
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Get the merged raw configuration dictionary."""
        if self._raw_config is None:
            self._raw_config = self._build_raw_config()
        return copy.deepcopy(self._raw_config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dotted key.

        Args:
            key: Dotted configuration key (e.g. 'logging.level')
            default: Value returned when the key is missing

        Returns:
            Configuration value
        """
        value: Any = self.get_raw_config()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def reload(self) -> None:
        """Drop cached configuration so the next access re-reads every layer."""
        self._raw_config = None
        self._app_config = None
        self.logger.debug("Configuration cache cleared")

    def _load_app_config(self) -> AppConfig:
        raw = self.get_raw_config()
        try:
            return validate_config(raw)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def _build_raw_config(self) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            config = _deep_merge(config, self._read_config_file(self._config_file))

        for env_var, key in ENV_OVERRIDES.items():
            if env_var in os.environ:
                config = _deep_merge(config, self._nest(key, os.environ[env_var]))
                self.logger.debug("Applied environment override", env_var=env_var, key=key)

        return expand_config_env_vars(config)

    def _read_config_file(self, config_file: str) -> Dict[str, Any]:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file is not valid JSON: {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a JSON object: {config_file}")

        self.logger.info("Loaded configuration file", config_file=config_file)
        return data

    @staticmethod
    def _nest(key: str, value: Any) -> Dict[str, Any]:
        nested: Dict[str, Any] = {}
        current = nested
        parts = key.split(".")
        for part in parts[:-1]:
            current[part] = {}
            current = current[part]
        current[parts[-1]] = value
        return nested


_config_manager: Optional[ConfigurationManager] = None


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """
    Get the shared configuration manager.

    The instance is built on first use. Passing a different config_path
    replaces it.
    """
    global _config_manager
    if _config_manager is None or (
        config_path is not None and config_path != _config_manager.config_file
    ):
        _config_manager = ConfigurationManager(config_path)
    return _config_manager
