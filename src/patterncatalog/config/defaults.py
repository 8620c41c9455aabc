# src/patterncatalog/config/defaults.py
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


# Environment variables that override individual configuration keys
ENV_OVERRIDES = {
    "PATTERNS_LOG_LEVEL": "logging.level",
    "PATTERNS_LOG_DESTINATION": "logging.destination",
    "PATTERNS_ENVIRONMENT": "environment",
}

DEFAULT_CONFIG = {
    "version": "1.0.0",
    "environment": "development",

    # Logging configuration
    "logging": {
        "level": LogLevel.WARNING.value,
        "destination": LogDestination.STDOUT.value,
        "file_path": "logs/patterns.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Visitor tax rates
    "tax": {
        "liquor": 0.18,
        "tobacco": 0.32,
        "necessity": 0.01,
    },

    # Template-method downloader
    "download": {
        "step_percent": 10,
    },

    "cli": {
        "default_format": "list",
    },
}
