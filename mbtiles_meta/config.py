"""Configuration management for mbtiles-meta.

Settings are resolved with the following precedence (highest to lowest):
1. CLI argument
2. Environment variable (MBTILES_META_<KEY>)
3. Project config file
4. Built-in default (None)

Config is stored in `.mbtiles-meta/config.yaml` under the project directory.

Usage:
    from mbtiles_meta.config import get_setting, set_setting

    # Get a setting with full precedence resolution
    spec_version = get_setting("spec_version", cli_value=cli_version, project_path=Path.cwd())

    # Set a project-level setting
    set_setting(Path.cwd(), "spec_version", "1.1")
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from mbtiles_meta.errors import ConfigParseError

# Known settings for documentation/validation (but unknown keys are still allowed)
KNOWN_SETTINGS: frozenset[str] = frozenset({"spec_version"})

CONFIG_DIRNAME = ".mbtiles-meta"
CONFIG_FILENAME = "config.yaml"
ENV_PREFIX = "MBTILES_META_"


def get_config_path(project_path: Path) -> Path:
    """Get the path to the config file for a project.

    Args:
        project_path: Root directory of the project.

    Returns:
        Path to .mbtiles-meta/config.yaml
    """
    return project_path / CONFIG_DIRNAME / CONFIG_FILENAME


def load_config(project_path: Path) -> dict[str, Any]:
    """Load configuration from .mbtiles-meta/config.yaml.

    Args:
        project_path: Root directory of the project.

    Returns:
        Config dictionary. Returns empty dict if file doesn't exist.

    Raises:
        ConfigParseError: If the file is not valid YAML or not a mapping.
    """
    config_file = get_config_path(project_path)

    if not config_file.exists():
        return {}

    content = config_file.read_text()
    if not content.strip():
        return {}

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(str(config_file), str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(str(config_file), "top level must be a mapping")
    return data


def save_config(project_path: Path, config: dict[str, Any]) -> None:
    """Save configuration to .mbtiles-meta/config.yaml.

    Creates the .mbtiles-meta directory if it doesn't exist.

    Args:
        project_path: Root directory of the project.
        config: Config dictionary to save.
    """
    config_file = get_config_path(project_path)
    config_file.parent.mkdir(parents=True, exist_ok=True)

    content = yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
    config_file.write_text(content)


def _get_env_var_name(key: str) -> str:
    """Convert a setting key to environment variable name.

    Args:
        key: Setting key (e.g., "spec_version")

    Returns:
        Environment variable name (e.g., "MBTILES_META_SPEC_VERSION")
    """
    return f"{ENV_PREFIX}{key.upper()}"


def get_setting(
    key: str,
    cli_value: Any | None = None,
    project_path: Path | None = None,
) -> Any | None:
    """Resolve a setting with full precedence.

    Args:
        key: Setting key (e.g., "spec_version")
        cli_value: Value passed via CLI argument (highest precedence)
        project_path: Project directory for loading the config file

    Returns:
        Resolved value, or None if not found at any level.
    """
    if cli_value is not None:
        return cli_value

    env_value = os.environ.get(_get_env_var_name(key))
    if env_value is not None:
        return env_value

    if project_path is None:
        return None

    config = load_config(project_path)
    if key in config:
        return config[key]

    return None


def set_setting(project_path: Path, key: str, value: Any) -> None:
    """Set a project-level configuration value.

    Creates the config file and .mbtiles-meta directory if they don't exist.

    Args:
        project_path: Root directory of the project.
        key: Setting key
        value: Value to set
    """
    config = load_config(project_path)
    config[key] = value
    save_config(project_path, config)


def unset_setting(project_path: Path, key: str) -> bool:
    """Remove a configuration value.

    Args:
        project_path: Root directory of the project.
        key: Setting key to remove

    Returns:
        True if the key existed and was removed, False if key didn't exist.
    """
    config = load_config(project_path)
    if key not in config:
        return False
    del config[key]
    save_config(project_path, config)
    return True


def list_settings(project_path: Path | None = None) -> dict[str, dict[str, Any]]:
    """List all settings with their sources.

    Args:
        project_path: Project directory for loading the config file.

    Returns:
        Dict mapping setting keys to {"value": ..., "source": ...}
        where source is "env", "project" or "default".
    """
    config = load_config(project_path) if project_path else {}
    all_keys = set(config.keys()) | KNOWN_SETTINGS

    result: dict[str, dict[str, Any]] = {}
    for key in sorted(all_keys):
        if _get_env_var_name(key) in os.environ:
            source = "env"
        elif key in config:
            source = "project"
        else:
            source = "default"
        value = get_setting(key, project_path=project_path)
        if value is not None or source != "default":
            result[key] = {"value": value, "source": source}

    return result
