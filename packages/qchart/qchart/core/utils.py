"""qchart: Core Utilities
---------------------------------------------------------
YAML loading and dictionary merging used by the configuration layer.

Public API
----------
``load_yaml_file`` : Load a YAML mapping with error handling
``deep_merge_dicts`` : Recursive dictionary merge
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .errors import QChartConfigError, QChartIOError


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file whose top level is a mapping.

    Parameters
    ----------
    path : Path
        Path to the YAML file

    Returns
    -------
    Dict[str, Any]
        Loaded YAML data; an empty file yields an empty dict

    Raises
    ------
    QChartIOError
        If the file doesn't exist
    QChartConfigError
        If the file can't be parsed or is not a mapping

    """
    if not path.exists():
        raise QChartIOError(f"File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise QChartConfigError(f"Failed to parse YAML file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise QChartConfigError(
            f"Expected a mapping at the top of {path}, got {type(data).__name__}"
        )
    return data


def deep_merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated by ``override``, merging nested mappings.

    A key present in both inputs keeps the override value unless both values
    are dicts, in which case they are merged the same way. Neither input is
    modified.
    """
    merged = dict(base)
    for key, new in (override or {}).items():
        old = merged.get(key)
        merged[key] = (
            deep_merge_dicts(old, new)
            if isinstance(old, dict) and isinstance(new, dict)
            else new
        )
    return merged
