"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR = Path(__file__).parent


def load_yaml_config(filename: str | Path) -> dict[str, Any]:
    """Load a YAML mapping.

    Relative names resolve against the config/ directory, so the bundled
    ``laws.yaml`` is found wherever the package is installed. An absolute
    path is used as given.

    Raises:
        ValueError: the document is not a mapping at the top level.
    """
    path = Path(filename)
    if not path.is_absolute():
        path = CONFIG_DIR / path
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: expected a mapping, got {type(data).__name__}")
    return data
