"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
Every key is optional; an absent file yields the defaults.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from exportclean.config.settings import ExportConfig


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return _process_config_values(data) if data else {}


def load_config(
    config_path: Path | None = None,
    base_path: Path | None = None,
) -> ExportConfig:
    """
    Load export configuration from YAML file(s).

    Example config:
        cleaning:
          date_columns: ["created", "updated"]
          timestamp_separator: "T"
        output:
          format: xml

    Args:
        config_path: Path to the main configuration file (None = defaults).
        base_path: Optional path to base configuration for inheritance.

    Returns:
        Fully validated ExportConfig instance.

    Raises:
        ValueError: If the configuration is invalid.
    """
    if config_path is None:
        return ExportConfig()

    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        # Try to find base.yaml in same directory
        potential_base = config_path.parent / "base.yaml"
        if potential_base.exists() and potential_base != config_path:
            base_data = load_yaml(potential_base)
        else:
            base_data = {}

    main_data = load_yaml(config_path)

    merged = _deep_merge(base_data, main_data)

    return ExportConfig.model_validate(merged)
