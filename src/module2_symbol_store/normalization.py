# file: src/module2_symbol_store/normalization.py

"""
Payload normalization before encoding.

Two workarounds are applied to every payload:
    1. One padding byte (a space) is appended, so a payload sitting exactly
       on a capacity boundary is never under-allocated.
    2. The symbol size is chosen here and forced on the encoder, instead of
       letting the encoder search for one.
"""

from numbers import Integral
from typing import Tuple

from src.module1_ecc200 import ECC200CapacityError, select_symbol_size

from .errors import EncodingFailedError, InvalidInputError

DEFAULT_PADDING_BYTE = b" "
DEFAULT_TEXT_ENCODING = "utf-8"


def coerce_payload(payload, text_encoding: str = DEFAULT_TEXT_ENCODING) -> bytes:
    """
    Convert a payload to bytes.

    Accepts bytes-like objects, str (encoded with `text_encoding`),
    integers (their decimal text) and objects implementing __bytes__.

    Raises:
        InvalidInputError: If the payload is None, not convertible or empty
    """
    if payload is None:
        raise InvalidInputError("Payload is required, got None")

    if isinstance(payload, (bytes, bytearray, memoryview)):
        data = bytes(payload)
    elif isinstance(payload, str):
        try:
            data = payload.encode(text_encoding)
        except (UnicodeEncodeError, LookupError) as e:
            raise InvalidInputError(
                f"Payload cannot be encoded as {text_encoding}: {e}"
            ) from e
    elif isinstance(payload, Integral) and not isinstance(payload, bool):
        data = str(int(payload)).encode("ascii")
    elif hasattr(type(payload), "__bytes__"):
        try:
            data = bytes(payload)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Payload conversion to bytes failed: {e}") from e
    else:
        raise InvalidInputError(
            f"Payload must be convertible to bytes, got {type(payload).__name__}"
        )

    if len(data) == 0:
        raise InvalidInputError("Payload must not be empty")

    return data


def pad_payload(data: bytes, padding_byte: bytes = DEFAULT_PADDING_BYTE) -> bytes:
    """Append the single padding byte the encoder sees after every payload."""
    if len(padding_byte) != 1:
        raise ValueError(f"padding_byte must be exactly one byte, got {padding_byte!r}")
    return data + padding_byte


def select_dimensions(padded_length: int) -> Tuple[int, int]:
    """
    Choose (width, height) for a padded payload length.

    Returns the first size in canonical table order whose data capacity
    is >= padded_length.

    Raises:
        EncodingFailedError: If no supported size is large enough
    """
    try:
        size = select_symbol_size(padded_length)
    except ECC200CapacityError as e:
        raise EncodingFailedError(
            f"No symbol size holds {padded_length} bytes",
            payload_length=padded_length,
        ) from e

    return size.width, size.height
