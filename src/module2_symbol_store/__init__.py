# file: src/module2_symbol_store/__init__.py

"""
Module 2: Symbol Store

Owns one encoded symbol across repeated encodes: payload normalization,
size pre-selection, delegation to the ECC200 encoder (Module 1) and
atomic replacement of the module buffer and codeword stream.

Public API:
    - SymbolStore.create() -> SymbolStore
    - SymbolStore.encode(payload) -> Symbol
    - SymbolStore.destroy() -> None
    - select_dimensions(padded_length) -> (width, height)
"""

from .store import SymbolStore
from .symbol import Symbol
from .normalization import coerce_payload, pad_payload, select_dimensions
from .errors import (
    SymbolError,
    InvalidInputError,
    EncodingFailedError,
    UseBeforeEncodeError,
    SymbolConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    "SymbolStore",
    "Symbol",
    "coerce_payload",
    "pad_payload",
    "select_dimensions",
    "SymbolError",
    "InvalidInputError",
    "EncodingFailedError",
    "UseBeforeEncodeError",
    "SymbolConfigurationError",
]
