"""YAML configuration loading.

Uses ``yaml.safe_load`` so that only plain YAML types (strings, numbers,
lists, dicts) are produced and no Python object is ever instantiated from
a YAML tag. Used by
[ParserConfig.from_yaml()][lnconnect.core.config.ParserConfig.from_yaml].
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a dictionary, or an empty dict when the
        file holds no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.

    Warning:
        The structure of the result is not validated here; pass it to
        [ParserConfig.from_dict()][lnconnect.core.config.ParserConfig.from_dict].
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
