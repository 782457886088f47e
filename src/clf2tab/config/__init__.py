"""Configuration module."""

from .constants import (
    ERROR_LINE_TEMPLATE,
    FIELD_DELIMITER,
    OUTPUT_FIELDS,
    RECORD_TERMINATOR,
)
from .loader import load_config_file
from .settings import Settings, clear_settings_cache, get_settings

__all__ = [
    # Output format
    "FIELD_DELIMITER",
    "RECORD_TERMINATOR",
    "ERROR_LINE_TEMPLATE",
    "OUTPUT_FIELDS",
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Config loading
    "load_config_file",
]
