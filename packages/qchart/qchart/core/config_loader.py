"""Configuration loading utilities.

Loads the system configuration from the packaged ``system.yaml`` and its
override chain, and caches the result for the rest of the process.
"""

from __future__ import annotations

import importlib.resources as ilr
import os
from pathlib import Path

from pydantic import ValidationError

from .config import SystemConfig
from .errors import QChartConfigError, QChartError, get_logger
from .utils import deep_merge_dicts, load_yaml_file

logger = get_logger()

ENV_VAR = "QCHART_SYSTEM_CONFIG"

_SYSTEM_CONFIG_CACHE: SystemConfig | None = None


def user_config_path() -> Path:
    return Path.home() / ".qchart" / "config.yaml"


def load_system_config(
    *, force_reload: bool = False, config_path: str | Path | None = None
) -> SystemConfig:
    """Load system configuration with override chain.

    Search order (later overrides earlier):
    1. Package default (qchart.core/system.yaml)
    2. ~/.qchart/config.yaml (User-specific)
    3. QCHART_SYSTEM_CONFIG environment variable
    4. Explicitly provided config_path

    Parameters
    ----------
    force_reload : bool
        If True, ignore cache and reload
    config_path : str or Path, optional
        Path to specific config file to override everything else

    Returns
    -------
    SystemConfig
        Loaded system configuration

    Raises
    ------
    QChartConfigError
        If the explicit file cannot be read or the merged result is invalid

    """
    global _SYSTEM_CONFIG_CACHE

    if _SYSTEM_CONFIG_CACHE is not None and not force_reload and config_path is None:
        return _SYSTEM_CONFIG_CACHE

    # 1. Package default
    try:
        system_yaml_path = ilr.files("qchart.core").joinpath("system.yaml")
        config_dict = load_yaml_file(Path(str(system_yaml_path)))
    except QChartError:
        logger.warning("Could not load default system.yaml from package")
        config_dict = {}

    # 2. User config, 3. environment variable
    optional_paths = [user_config_path()]
    env_path = os.environ.get(ENV_VAR)
    if env_path:
        optional_paths.append(Path(env_path))

    for path in optional_paths:
        if not path.exists():
            continue
        try:
            config_dict = deep_merge_dicts(config_dict, load_yaml_file(path))
        except QChartError as e:
            logger.warning(f"Failed to load config {path}: {e}")

    # 4. Explicit path
    if config_path:
        try:
            explicit_dict = load_yaml_file(Path(config_path))
        except QChartError as e:
            raise QChartConfigError(
                f"Failed to load explicit config {config_path}: {e}"
            ) from e
        config_dict = deep_merge_dicts(config_dict, explicit_dict)

    try:
        config = SystemConfig(**config_dict)
    except ValidationError as e:
        raise QChartConfigError(f"Invalid system configuration: {e}") from e

    _SYSTEM_CONFIG_CACHE = config
    return config


def reset_system_config_cache() -> None:
    global _SYSTEM_CONFIG_CACHE
    _SYSTEM_CONFIG_CACHE = None
