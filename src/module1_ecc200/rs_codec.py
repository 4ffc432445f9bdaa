# file: src/module1_ecc200/rs_codec.py

"""
Reed-Solomon codec for ECC200 check codewords.

Uses the reedsolo library for Galois Field arithmetic and RS encoding.
ECC200 works in GF(256) with primitive polynomial 0x12D and a generator
polynomial with roots alpha^1 .. alpha^n. Large symbols split their data
into interleaved blocks that are protected independently.
"""

from typing import List
from reedsolo import RSCodec

from .errors import ECC200EncodingError, ECC200ConfigurationError
from .symbol_sizes import SymbolSize

GF_PRIMITIVE = 0x12D
GF_GENERATOR = 2
FIRST_CONSECUTIVE_ROOT = 1


class ReedSolomonCodec:
    """
    Reed-Solomon encoder for a single ECC200 block structure.

    Parameters:
        nsym (int): Check codewords per block

    Invariants:
        - block data + nsym <= 255 (GF(256) constraint)
        - Check codewords come out highest-order coefficient first
    """

    def __init__(self, nsym: int):
        if nsym < 1 or nsym > 254:
            raise ECC200ConfigurationError(f"nsym={nsym} must be in [1, 254]")

        self.nsym = nsym
        self.codec = RSCodec(
            nsym,
            nsize=255,
            fcr=FIRST_CONSECUTIVE_ROOT,
            prim=GF_PRIMITIVE,
            generator=GF_GENERATOR,
            c_exp=8,
        )

    def check_codewords(self, block: bytes) -> bytes:
        """
        Compute the check codewords for one data block.

        Args:
            block: Data codewords of a single block

        Returns:
            nsym check codewords

        Raises:
            ECC200EncodingError: If the block is too long or encoding fails
        """
        if len(block) + self.nsym > 255:
            raise ECC200EncodingError(
                f"Block of {len(block)} codewords plus {self.nsym} check "
                f"codewords exceeds GF(256) limit of 255"
            )

        try:
            encoded = self.codec.encode(bytearray(block))
        except Exception as e:
            raise ECC200EncodingError(f"Reed-Solomon encoding failed: {e}") from e

        return bytes(encoded[len(block):])


def add_error_correction(data: bytes, size: SymbolSize) -> bytes:
    """
    Append interleaved check codewords to a full data region.

    Data codeword i belongs to block i % num_blocks, and check codeword j
    of block b lands at position capacity + b + j * num_blocks.

    Args:
        data: Exactly size.data_codewords padded data codewords
        size: Target symbol size

    Returns:
        data followed by size.ecc_codewords check codewords
    """
    if len(data) != size.data_codewords:
        raise ECC200EncodingError(
            f"Expected {size.data_codewords} data codewords, got {len(data)}"
        )

    blocks = size.num_blocks
    codec = ReedSolomonCodec(size.ecc_block)
    ecc: List[int] = [0] * size.ecc_codewords

    for b in range(blocks):
        block = data[b::blocks]
        check = codec.check_codewords(block)
        for j, value in enumerate(check):
            ecc[b + j * blocks] = value

    return bytes(data) + bytes(ecc)
