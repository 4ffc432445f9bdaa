# file: src/module1_ecc200/__init__.py

"""
Module 1: ECC200 Encoder

Encodes payload bytes into an ECC200 Data Matrix symbol: ASCII
encodation, Reed-Solomon check codewords and module placement.
Produces the raw module buffer consumed by the symbol store (Module 2).

Public API:
    - ecc200_encode(width_hint, height_hint, payload, payload_length) -> EncodedSymbol
    - select_symbol_size(length) -> SymbolSize
    - find_symbol_size(width, height) -> SymbolSize | None
"""

from .encoder import ecc200_encode, EncodedSymbol
from .symbol_sizes import (
    SymbolSize,
    SYMBOL_SIZES,
    MAX_DATA_CODEWORDS,
    select_symbol_size,
    find_symbol_size,
)
from .errors import (
    ECC200Error,
    ECC200EncodingError,
    ECC200CapacityError,
    ECC200ConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    "ecc200_encode",
    "EncodedSymbol",
    "SymbolSize",
    "SYMBOL_SIZES",
    "MAX_DATA_CODEWORDS",
    "select_symbol_size",
    "find_symbol_size",
    "ECC200Error",
    "ECC200EncodingError",
    "ECC200CapacityError",
    "ECC200ConfigurationError",
]
