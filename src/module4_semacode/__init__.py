# file: src/module4_semacode/__init__.py

"""
Module 4: Semacode Encoder

Public object surface for creating semacodes (ECC200 Data Matrix
symbols) from strings. No images are produced: the symbol is exposed as
a boolean grid, a '1'/'0' string or a numpy array, so it can be rendered
to HTML, SVG, PDF or stored for later use.

Public API:
    - Encoder(payload, config=None)
    - load_config(config_path=None, overrides=None) -> dict
"""

from .encoder import Encoder
from .config import load_config, get_default_config, validate_config
from src.module2_symbol_store import (
    SymbolError,
    InvalidInputError,
    EncodingFailedError,
    UseBeforeEncodeError,
    SymbolConfigurationError,
)

__version__ = "0.7.4"

__all__ = [
    "Encoder",
    "load_config",
    "get_default_config",
    "validate_config",
    "SymbolError",
    "InvalidInputError",
    "EncodingFailedError",
    "UseBeforeEncodeError",
    "SymbolConfigurationError",
]
