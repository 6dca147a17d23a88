"""TOML configuration files, layered and deep-merged.

``config/default.toml`` is required; ``config/{TOPIARY_ENV}.toml`` is laid
over it when present. The merged dict feeds the Settings model below any
TOPIARY_* environment variables.
"""

import os
import tomllib
from functools import reduce
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "TOPIARY_CONFIG_DIR"
ENVIRONMENT_ENV = "TOPIARY_ENV"
DEFAULT_ENVIRONMENT = "development"


def get_config_dir() -> Path:
    """Resolve the directory holding the TOML files.

    TOPIARY_CONFIG_DIR wins when set and must exist. Otherwise the nearest
    ``config/`` in the working directory or its parents is used, falling
    back to a relative ``config``.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    cwd = Path.cwd()
    for candidate in (cwd, *cwd.parents):
        if (candidate / "config").is_dir():
            return candidate / "config"
    return Path("config")


def get_environment() -> str:
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")
    return tomllib.loads(file_path.read_text(encoding="utf-8"))


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``override``; tables merge recursively.

    Neither input is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_files(config_dir: Path | None = None) -> list[Path]:
    """List the TOML layers to load, lowest priority first.

    Raises:
        FileNotFoundError: If default.toml is missing
    """
    config_dir = config_dir or get_config_dir()
    default = config_dir / "default.toml"
    if not default.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default}. "
            f"Create config/default.toml or set {CONFIG_DIR_ENV}."
        )

    layers = [default]
    overlay = config_dir / f"{get_environment()}.toml"
    if overlay.is_file():
        layers.append(overlay)
    return layers


def load_config() -> dict[str, Any]:
    """Load and merge every TOML layer."""
    return reduce(deep_merge, (load_toml(path) for path in config_files()), {})
