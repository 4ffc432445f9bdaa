# file: src/module2_symbol_store/store.py

"""
Symbol store.

Owns the state of one logical symbol and mediates every mutation:
    empty --encode--> encoded --encode--> encoded
    any   --destroy-> empty

The encoded state is a single immutable Symbol value, so the module
buffer and the codeword stream are always installed and released together.
Not safe for concurrent mutation; callers serialize encode/destroy.
"""

import logging
from typing import Optional

from src.module1_ecc200 import ECC200Error, ecc200_encode

from .errors import EncodingFailedError, UseBeforeEncodeError
from .normalization import (
    DEFAULT_PADDING_BYTE,
    DEFAULT_TEXT_ENCODING,
    coerce_payload,
    pad_payload,
    select_dimensions,
)
from .symbol import Symbol

logger = logging.getLogger(__name__)


class SymbolStore:
    """
    Lifecycle owner for one encoded symbol.

    Parameters:
        padding_byte (bytes): Byte appended to every payload before encoding
        text_encoding (str): Codec used to turn str payloads into bytes
        encode_fn: Encode primitive with the ecc200_encode signature

    Invariants:
        - symbol is None (empty) or a complete Symbol (encoded)
        - InvalidInputError never changes the current state
        - EncodingFailedError always leaves the store empty
    """

    def __init__(
        self,
        padding_byte: bytes = DEFAULT_PADDING_BYTE,
        text_encoding: str = DEFAULT_TEXT_ENCODING,
        encode_fn=ecc200_encode
    ):
        if len(padding_byte) != 1:
            raise ValueError(f"padding_byte must be exactly one byte, got {padding_byte!r}")

        self.padding_byte = bytes(padding_byte)
        self.text_encoding = text_encoding
        self._encode_fn = encode_fn
        self._symbol: Optional[Symbol] = None

    @classmethod
    def create(cls, **kwargs) -> "SymbolStore":
        """Return an empty store."""
        return cls(**kwargs)

    # ------------------------------------------------------------------
    # LIFECYCLE
    # ------------------------------------------------------------------
    def encode(self, payload) -> Symbol:
        """
        Encode a payload and install the result, replacing any prior symbol.

        Args:
            payload: bytes-like, str, int or object implementing __bytes__

        Returns:
            The newly installed Symbol

        Raises:
            InvalidInputError: Payload missing, not convertible or empty
                               (store unchanged)
            EncodingFailedError: No valid symbol for the payload
                                 (store left empty)
        """
        # validation happens before any mutation
        data = coerce_payload(payload, self.text_encoding)

        self.destroy()

        padded = pad_payload(data, self.padding_byte)
        try:
            width, height = select_dimensions(len(padded))
        except EncodingFailedError as e:
            logger.warning("Encoding %d bytes failed: %s", len(padded), e)
            raise

        logger.debug(
            "Encoding %d bytes (+1 padding) with size hint %dx%d",
            len(data), width, height,
        )

        try:
            encoded = self._encode_fn(width, height, padded, len(padded))
        except ECC200Error as e:
            logger.warning(
                "Encoding %d bytes into %dx%d failed: %s",
                len(padded), width, height, e,
            )
            raise EncodingFailedError(
                f"No valid encoding for {len(padded)} bytes at {width}x{height}: {e}",
                payload_length=len(padded),
                width_hint=width,
                height_hint=height,
            ) from e

        symbol = Symbol.from_encoded(encoded)
        self._symbol = symbol

        logger.debug(
            "Installed %dx%d symbol: %d/%d data codewords, %d ECC",
            symbol.width, symbol.height, symbol.raw_encoded_length,
            symbol.symbol_capacity, symbol.ecc_bytes,
        )
        return symbol

    def destroy(self):
        """Release the current symbol, if any. Safe to call repeatedly."""
        self._symbol = None

    # ------------------------------------------------------------------
    # ACCESSORS (None while empty)
    # ------------------------------------------------------------------
    @property
    def symbol(self) -> Optional[Symbol]:
        return self._symbol

    @property
    def is_encoded(self) -> bool:
        return self._symbol is not None

    def require_symbol(self) -> Symbol:
        """
        Return the current symbol or fail.

        Raises:
            UseBeforeEncodeError: If the store is empty
        """
        if self._symbol is None:
            raise UseBeforeEncodeError("Symbol has not been encoded")
        return self._symbol

    @property
    def width(self) -> Optional[int]:
        return None if self._symbol is None else self._symbol.width

    @property
    def height(self) -> Optional[int]:
        return None if self._symbol is None else self._symbol.height

    @property
    def length(self) -> Optional[int]:
        return None if self._symbol is None else self._symbol.length

    @property
    def raw_encoded_length(self) -> Optional[int]:
        return None if self._symbol is None else self._symbol.raw_encoded_length

    @property
    def symbol_capacity(self) -> Optional[int]:
        return None if self._symbol is None else self._symbol.symbol_capacity

    @property
    def ecc_bytes(self) -> Optional[int]:
        return None if self._symbol is None else self._symbol.ecc_bytes

    @property
    def codewords(self) -> Optional[bytes]:
        return None if self._symbol is None else self._symbol.codewords

    def __repr__(self) -> str:
        if self._symbol is None:
            return "SymbolStore(empty)"
        return f"SymbolStore({self._symbol.width}x{self._symbol.height})"
