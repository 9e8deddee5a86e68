"""YAML configuration loading for jidkit.

Provides safe YAML file loading using ``yaml.safe_load`` so that a
configuration file can never instantiate arbitrary Python objects. Used by
[PrepConfig.from_yaml()][jidkit.core.prep.PrepConfig.from_yaml] and
[ComponentNormalizer.from_yaml()][jidkit.core.prep.ComponentNormalizer.from_yaml].

Examples:
    ```python
    from jidkit.core.yaml import load_yaml

    config = load_yaml("config/jidkit.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a dictionary. Returns an empty dict if the
        file exists but contains no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file is not valid YAML or its top level
            is not a mapping.

    Warning:
        The structure of the result is not validated here; pass it to
        [PrepConfig][jidkit.core.prep.PrepConfig] for schema validation.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
        )
    return data
