# file: src/module1_ecc200/encoder.py

"""
ECC200 encoding entry point.

Provides ecc200_encode(), the encode primitive consumed by the symbol
store: payload bytes in, placed module buffer plus codeword metadata out.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .encodation import ascii_encode, pad_codewords
from .errors import ECC200ConfigurationError, ECC200EncodingError
from .placement import place_modules
from .rs_codec import add_error_correction
from .symbol_sizes import SymbolSize, find_symbol_size, select_symbol_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class EncodedSymbol:
    """Result of one ECC200 encode call."""
    bits: np.ndarray  # (width * height,), bool, bottom row first
    width: int
    height: int
    codewords: bytes  # data + check codewords
    raw_encoded_length: int
    symbol_capacity: int
    ecc_bytes: int


def ecc200_encode(
    width_hint: Optional[int],
    height_hint: Optional[int],
    payload: bytes,
    payload_length: Optional[int] = None
) -> EncodedSymbol:
    """
    Encode bytes into an ECC200 Data Matrix symbol.

    Args:
        width_hint: Preferred symbol width (None = pick the smallest that fits).
                    A hinted size too small for the encoded stream is
                    replaced by the smallest size that holds it.
        height_hint: Preferred symbol height (None = pick the smallest that fits)
        payload: Bytes to encode
        payload_length: Number of leading payload bytes to encode
                        (None = all of them)

    Returns:
        EncodedSymbol with the placed modules and codeword metadata

    Raises:
        ECC200EncodingError: If the payload is not bytes
        ECC200ConfigurationError: If the hinted size is not an ECC200 size
        ECC200CapacityError: If the payload does not fit the largest symbol

    Example:
        >>> symbol = ecc200_encode(10, 10, b"123456")
        >>> symbol.codewords.hex()
        '8ea4ba7219055866'
    """
    if not isinstance(payload, (bytes, bytearray)):
        raise ECC200EncodingError(f"Payload must be bytes, got {type(payload)}")

    if payload_length is None:
        payload_length = len(payload)
    if payload_length < 0 or payload_length > len(payload):
        raise ECC200EncodingError(
            f"payload_length {payload_length} outside payload of {len(payload)} bytes"
        )

    encoded = ascii_encode(bytes(payload[:payload_length]))
    size = _resolve_size(width_hint, height_hint, len(encoded))

    if len(encoded) > size.data_codewords:
        # hint is advisory: grow to the first size that holds the stream
        hinted = size
        size = select_symbol_size(len(encoded))
        logger.debug(
            "Hint %dx%d holds %d codewords, need %d; using %dx%d",
            hinted.width, hinted.height, hinted.data_codewords,
            len(encoded), size.width, size.height,
        )

    logger.debug(
        "ECC200 %dx%d: %d payload bytes -> %d/%d data codewords, %d check",
        size.width, size.height, payload_length, len(encoded),
        size.data_codewords, size.ecc_codewords,
    )

    data = pad_codewords(encoded, size.data_codewords)
    codewords = add_error_correction(data, size)
    bits = place_modules(codewords, size)
    bits.setflags(write=False)

    return EncodedSymbol(
        bits=bits,
        width=size.width,
        height=size.height,
        codewords=codewords,
        raw_encoded_length=len(encoded),
        symbol_capacity=size.data_codewords,
        ecc_bytes=size.ecc_codewords,
    )


def _resolve_size(
    width_hint: Optional[int],
    height_hint: Optional[int],
    encoded_length: int
) -> SymbolSize:
    """Honour an explicit size hint, otherwise pick by encoded length."""
    if width_hint is None and height_hint is None:
        return select_symbol_size(encoded_length)

    if width_hint is None or height_hint is None:
        raise ECC200ConfigurationError(
            f"Both width and height hints are required, got {width_hint}x{height_hint}"
        )

    size = find_symbol_size(width_hint, height_hint)
    if size is None:
        raise ECC200ConfigurationError(f"Invalid size {width_hint}x{height_hint}")

    return size
