"""Configuration serialization to YAML format."""

from pathlib import Path
from typing import Any

import yaml

from cartprod.config.config import CartProdConfig
from cartprod.config.defaults import get_default_config


def config_to_dict(
    config: CartProdConfig, include_defaults: bool = False
) -> dict[str, Any]:
    """Convert CartProdConfig to dictionary for YAML serialization.

    Parameters
    ----------
    config : CartProdConfig
        Configuration to convert.
    include_defaults : bool
        Whether to include values equal to the defaults. The profile name is
        always kept.

    Returns
    -------
    dict[str, Any]
        JSON-compatible dictionary.
    """
    config_dict: dict[str, Any] = config.model_dump(mode="json")

    if not include_defaults:
        default_dict: dict[str, Any] = get_default_config().model_dump(mode="json")
        config_dict = _remove_defaults(config_dict, default_dict)
        config_dict = {"profile": config.profile, **config_dict}

    return config_dict


def _remove_defaults(
    config_dict: dict[str, Any], default_dict: dict[str, Any]
) -> dict[str, Any]:
    """Remove values that match defaults from config dictionary."""
    result: dict[str, Any] = {}
    for key, value in config_dict.items():
        if key not in default_dict:
            result[key] = value
        elif isinstance(value, dict) and isinstance(default_dict[key], dict):
            nested_result = _remove_defaults(value, default_dict[key])  # type: ignore[arg-type]
            if nested_result:  # only include if not empty after removing defaults
                result[key] = nested_result
        elif value != default_dict[key]:
            result[key] = value
    return result


def to_yaml(config: CartProdConfig, include_defaults: bool = False) -> str:
    """Serialize configuration to a YAML string.

    Parameters
    ----------
    config : CartProdConfig
        Configuration to serialize.
    include_defaults : bool
        Whether to include values equal to the defaults.

    Returns
    -------
    str
        YAML document.
    """
    data = config_to_dict(config, include_defaults=include_defaults)
    return yaml.dump(data, default_flow_style=False, sort_keys=False)


def save_yaml(
    config: CartProdConfig, path: Path | str, include_defaults: bool = False
) -> Path:
    """Write configuration to a YAML file.

    Parameters
    ----------
    config : CartProdConfig
        Configuration to save.
    path : Path | str
        Destination file. Parent directories are created.
    include_defaults : bool
        Whether to include values equal to the defaults.

    Returns
    -------
    Path
        Path written to.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_yaml(config, include_defaults=include_defaults))
    return path
