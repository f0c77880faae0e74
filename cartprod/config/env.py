"""Environment variable support for configuration.

Variables named ``CARTPROD_<SECTION>__<KEY>`` map onto nested configuration
values, e.g. ``CARTPROD_LOGGING__LEVEL=DEBUG``.
"""

import os
from pathlib import Path
from typing import Any

ENV_PREFIX = "CARTPROD_"


def parse_env_value(value: str) -> Any:
    """Parse environment variable value to appropriate Python type.

    Handles: bool, int, float, Path, None, string

    Parameters
    ----------
    value : str
        Raw environment variable value.

    Returns
    -------
    Any
        Parsed value with appropriate type.

    Examples
    --------
    >>> parse_env_value("true")
    True
    >>> parse_env_value("42")
    42
    >>> parse_env_value("/var/log/cartprod.log")
    PosixPath('/var/log/cartprod.log')
    >>> parse_env_value("none") is None
    True
    """
    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False
    if value.lower() in ("none", "null"):
        return None

    # handle numeric values; try int first
    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    # handle path-like strings
    if value.startswith(("/", "./", "~/", "../")):
        return Path(value).expanduser()

    return value


def env_to_nested_dict(env_vars: dict[str, str], prefix: str) -> dict[str, Any]:
    """Convert flat environment variables to nested dictionary.

    Parameters
    ----------
    env_vars : dict[str, str]
        Environment variables to convert.
    prefix : str
        Prefix to strip from variable names.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary.

    Examples
    --------
    >>> env_to_nested_dict({"CARTPROD_LOGGING__LEVEL": "DEBUG"}, "CARTPROD_")
    {'logging': {'level': 'DEBUG'}}
    """
    result: dict[str, Any] = {}

    for key, value in env_vars.items():
        if not key.startswith(prefix):
            continue

        # split on double underscore for nesting
        parts = [part.lower() for part in key[len(prefix) :].split("__")]

        current = result
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]

        current[parts[-1]] = parse_env_value(value)

    return result


def load_from_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load configuration values from environment variables.

    Parameters
    ----------
    prefix : str
        Environment variable prefix to filter on.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary from environment.
    """
    env_vars = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
    return env_to_nested_dict(env_vars, prefix)
