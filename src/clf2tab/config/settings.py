"""
Converter settings and configuration management.

Supports loading from:
1. Plain YAML config files
2. Environment variables (override the file)

Settings are built once per run and passed explicitly to the tokenizer;
nothing reads them from module state.
"""

import codecs
import logging
import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from ..exceptions import SettingsError
from .constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    ENV_ENCODING,
    ENV_LOG_LEVEL,
    ENV_SKIP_VALIDATION,
)
from .loader import load_config_file

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value: Any, default: bool) -> bool:
    """Interpret common truthy spellings; anything else is False."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a top-level config section, which must be a mapping if present."""
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise SettingsError(
            [f"{name} must be a mapping, got {type(section).__name__}"]
        )
    return section


@dataclass(frozen=True)
class Settings:
    """Settings for a conversion run."""

    # Accept every field without validation (segmentation still applies)
    skip_validation: bool = False

    # Text encoding of the input
    encoding: str = DEFAULT_ENCODING

    # Root logging level name
    log_level: str = DEFAULT_LOG_LEVEL

    def validate(self) -> list[str]:
        """Validate settings values. Returns list of errors."""
        errors = []

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"logging.level must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )
        if not self.encoding:
            errors.append("input.encoding must not be empty")
        else:
            try:
                codecs.lookup(self.encoding)
            except LookupError:
                errors.append(
                    f"input.encoding is not a known codec: {self.encoding!r}"
                )

        return errors

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())

    def to_dict(self) -> dict:
        """Convert to nested dictionary (same layout as the YAML file)."""
        return {
            "validation": {"skip": self.skip_validation},
            "input": {"encoding": self.encoding},
            "logging": {"level": self.log_level},
        }

    def with_overrides(self, **changes: Any) -> "Settings":
        """Return a copy with the given non-None fields replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "Settings":
        """Create Settings from a configuration dictionary (e.g., from YAML)."""
        validation = _section(config, "validation")
        source = _section(config, "input")
        log = _section(config, "logging")

        return cls(
            skip_validation=_parse_bool(validation.get("skip"), False),
            encoding=str(source.get("encoding", DEFAULT_ENCODING)),
            log_level=str(log.get("level", DEFAULT_LOG_LEVEL)).upper(),
        )

    @classmethod
    def from_env(cls, base: Optional["Settings"] = None) -> "Settings":
        """
        Create Settings from environment variables.

        Args:
            base: Settings to start from; unset variables keep its values
        """
        base = base or cls()
        log_level = os.environ.get(ENV_LOG_LEVEL)

        return cls(
            skip_validation=_parse_bool(
                os.environ.get(ENV_SKIP_VALIDATION), base.skip_validation
            ),
            encoding=os.environ.get(ENV_ENCODING, base.encoding),
            log_level=log_level.upper() if log_level else base.log_level,
        )


@lru_cache
def get_settings(config_path: Optional[str] = None) -> Settings:
    """
    Get cached settings instance.

    Loads the YAML config file if one is given, then applies environment
    variable overrides.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        Validated Settings instance

    Raises:
        FileNotFoundError: If config_path does not exist
        SettingsError: If the configuration is invalid
    """
    settings = Settings()
    if config_path:
        settings = Settings.from_dict(load_config_file(Path(config_path)))

    settings = Settings.from_env(base=settings)

    errors = settings.validate()
    if errors:
        raise SettingsError(errors, source=config_path or "environment")
    return settings


def clear_settings_cache() -> None:
    """Clear the cached settings (useful for testing)."""
    get_settings.cache_clear()
