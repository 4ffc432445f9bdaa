# file: src/module4_semacode/encoder.py

"""
Public semacode Encoder object.

Wraps a SymbolStore (Module 2) and the view functions (Module 3) behind
one object: construct it with a payload, read views and metadata, and
re-encode in place as often as needed.

Example:
    >>> semacode = Encoder("http://www.ruby-lang.org")
    >>> semacode.width, semacode.height
    (22, 22)
    >>> rows = semacode.to_grid()
    >>> text = str(semacode)
"""

from typing import Any, Dict, Optional

from src.module2_symbol_store import SymbolStore
from src.module3_views import Grid, to_array, to_bit_string, to_grid

from .config import load_config, padding_bytes


class Encoder:
    """
    Data Matrix (ECC200) encoder for a single, replaceable symbol.

    Scalar accessors return None before a successful encode (for example
    after a failed re-encode or close()); len() returns 0 in that state.
    Not thread-safe: serialize encode() and close() externally.
    """

    def __init__(
        self,
        payload,
        config: Optional[Dict[str, Any]] = None,
        config_path: Optional[str] = None
    ):
        """
        Create and encode a symbol.

        Args:
            payload: bytes-like, str, int or object implementing __bytes__
            config: Optional overrides merged over the loaded configuration
            config_path: Optional YAML file used instead of the packaged defaults

        Raises:
            InvalidInputError: If the payload is missing, not convertible or empty
            EncodingFailedError: If no symbol size can hold the payload
            SymbolConfigurationError: If the configuration is invalid
        """
        self.config = load_config(config_path, overrides=config)
        self._store = SymbolStore.create(
            padding_byte=padding_bytes(self.config),
            text_encoding=self.config["symbol"]["text_encoding"],
        )
        self._store.encode(payload)

    # ------------------------------------------------------------------
    # LIFECYCLE
    # ------------------------------------------------------------------
    def encode(self, payload) -> Grid:
        """
        Replace the current symbol with an encoding of `payload`.

        Returns:
            The new grid view (top row first)

        Raises:
            InvalidInputError: Payload rejected; the previous symbol is kept
            EncodingFailedError: Encoding failed; the encoder is left empty
        """
        self._store.encode(payload)
        return self.to_grid()

    def close(self):
        """Release the symbol. Calling it again is a no-op."""
        self._store.destroy()

    destroy = close

    def __enter__(self) -> "Encoder":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # ------------------------------------------------------------------
    # VIEWS
    # ------------------------------------------------------------------
    def to_grid(self) -> Optional[Grid]:
        """Rows of booleans, top row first, or None if not encoded."""
        return to_grid(self._store.symbol)

    to_a = to_grid

    @property
    def data(self) -> Optional[Grid]:
        return self.to_grid()

    def to_bit_string(self) -> Optional[str]:
        """Comma-terminated '1'/'0' rows, top row first, or None if not encoded."""
        views_config = self.config["views"]
        return to_bit_string(
            self._store.symbol,
            separator=views_config["row_separator"],
            trailing_separator=views_config["trailing_separator"],
        )

    to_s = to_bit_string
    to_str = to_bit_string

    def to_array(self):
        """Modules as a (height, width) numpy bool array, top row first."""
        return to_array(self._store.symbol)

    def __str__(self) -> str:
        text = self.to_bit_string()
        return "" if text is None else text

    def __repr__(self) -> str:
        if not self._store.is_encoded:
            return "Encoder(empty)"
        return f"Encoder({self.width}x{self.height}, ecc_bytes={self.ecc_bytes})"

    # ------------------------------------------------------------------
    # METADATA
    # ------------------------------------------------------------------
    @property
    def encoded_codewords(self) -> Optional[bytes]:
        return self._store.codewords

    encoding = encoded_codewords

    @property
    def width(self) -> Optional[int]:
        return self._store.width

    @property
    def height(self) -> Optional[int]:
        return self._store.height

    @property
    def length(self) -> Optional[int]:
        """Number of modules, width * height."""
        return self._store.length

    size = length

    def __len__(self) -> int:
        return self._store.length or 0

    @property
    def raw_encoded_length(self) -> Optional[int]:
        """Data codewords before padding and error correction."""
        return self._store.raw_encoded_length

    @property
    def symbol_capacity(self) -> Optional[int]:
        """Maximum data codewords the current symbol size can hold."""
        return self._store.symbol_capacity

    symbol_size = symbol_capacity

    @property
    def ecc_bytes(self) -> Optional[int]:
        """Codewords devoted to error correction."""
        return self._store.ecc_bytes
