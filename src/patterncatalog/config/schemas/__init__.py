"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .catalog_schema import CliConfig, DownloadConfig, TaxConfig
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "CliConfig",
    "DownloadConfig",
    "LoggingConfig",
    "TaxConfig",
    "validate_config",
]
