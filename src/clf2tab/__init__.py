"""
clf2tab: convert Apache Common/Combined Log Format lines to tab-separated records.

Output columns: address(es), client identity, user id, epoch seconds,
method, path, protocol, status code, content length[, referer[, user-agent]].
"""

from .config import Settings, get_settings
from .exceptions import ConversionError, SettingsError, TimestampFormatError
from .parsing import CLFTokenizer, FieldValidator, LineDriver, build_driver

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "ConversionError",
    "SettingsError",
    "TimestampFormatError",
    "CLFTokenizer",
    "FieldValidator",
    "LineDriver",
    "build_driver",
]
