"""
YAML configuration file loader.

Config files are plain YAML, e.g.::

    validation:
      skip: false
    input:
      encoding: utf-8
    logging:
      level: INFO
"""

from pathlib import Path
from typing import Any

import yaml

from ..exceptions import SettingsError


def load_config_file(file_path: Path) -> dict[str, Any]:
    """
    Read a YAML config file and return its mapping.

    Args:
        file_path: Path to the config file

    Returns:
        Parsed configuration (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file doesn't exist
        SettingsError: If the file is not valid YAML or not a mapping
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsError([f"invalid YAML: {e}"], source=str(file_path)) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise SettingsError(
            [f"expected a mapping at top level, got {type(config).__name__}"],
            source=str(file_path),
        )
    return config
