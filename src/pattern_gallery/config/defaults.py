# src/pattern_gallery/config/defaults.py
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


class OutputFormat(str, Enum):
    """CLI output format enumeration."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


DEFAULT_CONFIG = {
    "version": "1.0.0",

    # Logging configuration
    "logging": {
        "level": "WARNING",
        "destination": "stdout",
        "format": "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        "file": {
            "path": "${PATTERN_GALLERY_LOG_DIR:logs}/pattern-gallery.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },

    # Observer scenario configuration
    "stock": {
        "initial_price": 100,
    },

    # CLI output configuration
    "output": {
        "format": "list",
    },
}
