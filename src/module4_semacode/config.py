# file: src/module4_semacode/config.py

"""
Configuration loading for the semacode Encoder.

Defaults come from default_config.yaml next to this module (or the
hardcoded copy below when the file is missing); user overrides are
deep-merged on top.
"""

import copy
import os
from typing import Any, Dict, Optional

import yaml

from src.module2_symbol_store import SymbolConfigurationError

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "symbol": {
            "padding_byte": " ",
            "text_encoding": "utf-8",
        },
        "views": {
            "row_separator": ",",
            "trailing_separator": True,
        },
    }


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Load configuration from file and apply overrides.

    Args:
        config_path: Path to a YAML file. If None, uses default_config.yaml
                     shipped with the package (or hardcoded defaults).
        overrides: Nested dictionary merged over the loaded values

    Returns:
        Validated configuration dictionary

    Raises:
        SymbolConfigurationError: If the file is missing, malformed or
                                  holds invalid values
    """
    config = get_default_config()

    if config_path is None:
        if os.path.exists(DEFAULT_CONFIG_PATH):
            config = _merge(config, _read_yaml(DEFAULT_CONFIG_PATH))
    else:
        if not os.path.exists(config_path):
            raise SymbolConfigurationError(f"Config file not found: {config_path}")
        config = _merge(config, _read_yaml(config_path))

    if overrides:
        config = _merge(config, overrides)

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]):
    """
    Check the values the Encoder depends on.

    Raises:
        SymbolConfigurationError: On the first invalid value
    """
    try:
        symbol_config = config["symbol"]
        views_config = config["views"]
    except KeyError as e:
        raise SymbolConfigurationError(f"Missing required config key: {e}") from e

    for name, section in (("symbol", symbol_config), ("views", views_config)):
        if not isinstance(section, dict):
            raise SymbolConfigurationError(
                f"'{name}' section must be a mapping, got {type(section).__name__}"
            )

    padding = symbol_config.get("padding_byte")
    if not isinstance(padding, str) or len(padding) != 1 or ord(padding) > 0xFF:
        raise SymbolConfigurationError(
            f"symbol.padding_byte must be a single latin-1 character, got {padding!r}"
        )

    text_encoding = symbol_config.get("text_encoding")
    try:
        "".encode(text_encoding)
    except (TypeError, LookupError) as e:
        raise SymbolConfigurationError(f"Unknown text_encoding: {text_encoding!r}") from e

    if not isinstance(views_config.get("row_separator"), str):
        raise SymbolConfigurationError(
            f"views.row_separator must be a string, got {views_config.get('row_separator')!r}"
        )

    if not isinstance(views_config.get("trailing_separator"), bool):
        raise SymbolConfigurationError(
            f"views.trailing_separator must be a boolean, "
            f"got {views_config.get('trailing_separator')!r}"
        )


def padding_bytes(config: Dict[str, Any]) -> bytes:
    """The configured padding character as a single byte."""
    return config["symbol"]["padding_byte"].encode("latin-1")


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SymbolConfigurationError(f"Malformed config file {path}: {e}") from e

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise SymbolConfigurationError(
            f"Config file {path} must contain a mapping, got {type(loaded).__name__}"
        )
    return loaded


def _merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
