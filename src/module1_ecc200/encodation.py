# file: src/module1_ecc200/encodation.py

"""
ASCII encodation and pad codewords.

Turns payload bytes into ECC200 data codewords:
    - two consecutive digits  -> 130 + value
    - byte above 127          -> upper shift (235), byte - 127
    - any other byte          -> byte + 1
"""

from typing import List

from .errors import ECC200CapacityError

PAD = 129
UPPER_SHIFT = 235
DIGIT_PAIR_BASE = 130

_DIGITS = frozenset(b"0123456789")


def ascii_encode(data: bytes) -> bytes:
    """
    Encode bytes in ASCII encodation.

    Args:
        data: Payload bytes

    Returns:
        Data codewords before padding (the raw encoded stream)
    """
    out: List[int] = []
    i = 0
    n = len(data)

    while i < n:
        b = data[i]
        if b in _DIGITS and i + 1 < n and data[i + 1] in _DIGITS:
            out.append(DIGIT_PAIR_BASE + (b - 48) * 10 + (data[i + 1] - 48))
            i += 2
            continue
        if b > 127:
            out.append(UPPER_SHIFT)
            out.append(b - 127)
        else:
            out.append(b + 1)
        i += 1

    return bytes(out)


def pad_codewords(encoded: bytes, capacity: int) -> bytes:
    """
    Fill the data region up to `capacity` codewords.

    The first pad is 129, the rest are scrambled with the 253-state
    algorithm keyed on their 1-based position.

    Raises:
        ECC200CapacityError: If `encoded` is already longer than `capacity`
    """
    if len(encoded) > capacity:
        raise ECC200CapacityError(
            f"Encoded length {len(encoded)} exceeds symbol capacity {capacity}",
            required=len(encoded),
            available=capacity,
        )

    out = bytearray(encoded)
    if len(out) < capacity:
        out.append(PAD)

    while len(out) < capacity:
        position = len(out) + 1
        value = PAD + ((149 * position) % 253) + 1
        if value > 254:
            value -= 254
        out.append(value)

    return bytes(out)
