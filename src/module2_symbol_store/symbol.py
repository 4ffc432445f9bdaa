# file: src/module2_symbol_store/symbol.py

"""
Encoded symbol value.

A Symbol holds the placed module buffer and the codeword stream of one
encode call together with their metadata. It is immutable: the store
replaces the whole value, never one buffer at a time.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Symbol:
    """
    One encoded Data Matrix symbol.

    Attributes:
        width: Number of module columns
        height: Number of module rows
        bits: Read-only (width * height,) bool array, row-major,
              index = row * width + col, bottom row first
        codewords: Data + check codeword stream
        raw_encoded_length: Data codewords before padding/ECC
        symbol_capacity: Data codewords the symbol size can hold
        ecc_bytes: Check codewords
    """
    width: int
    height: int
    bits: np.ndarray
    codewords: bytes
    raw_encoded_length: int
    symbol_capacity: int
    ecc_bytes: int

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Invalid symbol size {self.width}x{self.height}")
        if self.bits.shape != (self.width * self.height,):
            raise ValueError(
                f"bits shape {self.bits.shape} does not match "
                f"{self.width}x{self.height}"
            )
        if self.symbol_capacity < self.raw_encoded_length:
            raise ValueError(
                f"raw_encoded_length {self.raw_encoded_length} exceeds "
                f"symbol_capacity {self.symbol_capacity}"
            )

    @classmethod
    def from_encoded(cls, encoded) -> "Symbol":
        """
        Take ownership of an encoder result.

        The module buffer is copied into a private read-only bool array so
        nothing outside the symbol aliases it.
        """
        bits = np.array(encoded.bits, dtype=bool, copy=True).reshape(-1)
        bits.setflags(write=False)
        return cls(
            width=int(encoded.width),
            height=int(encoded.height),
            bits=bits,
            codewords=bytes(encoded.codewords),
            raw_encoded_length=int(encoded.raw_encoded_length),
            symbol_capacity=int(encoded.symbol_capacity),
            ecc_bytes=int(encoded.ecc_bytes),
        )

    @property
    def length(self) -> int:
        return self.width * self.height
