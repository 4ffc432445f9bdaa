# file: tests/test_module1_ecc200.py

"""
Unit tests for Module 1: ECC200 Encoder.

Test coverage:
    - Symbol size table consistency and size selection
    - ASCII encodation and pad codewords
    - Reed-Solomon check codewords (reference vector + correction)
    - Module placement: finder and clock patterns
    - Size hints and failure modes
"""

import numpy as np
import pytest
from reedsolo import RSCodec

from src.module1_ecc200 import (
    ecc200_encode,
    SYMBOL_SIZES,
    MAX_DATA_CODEWORDS,
    select_symbol_size,
    find_symbol_size,
    ECC200EncodingError,
    ECC200CapacityError,
    ECC200ConfigurationError,
)
from src.module1_ecc200.encodation import ascii_encode, pad_codewords
from src.module1_ecc200.placement import mapping_matrix
from src.module1_ecc200.rs_codec import ReedSolomonCodec, add_error_correction


def top_down(encoded):
    """Modules as (height, width) with row 0 = top row."""
    return np.flipud(encoded.bits.reshape(encoded.height, encoded.width))


class TestSymbolSizes:
    """Test the ECC200 size table."""

    def test_table_in_canonical_order(self):
        """Sizes are sorted by capacity, then module count."""
        keys = [(s.data_codewords, s.module_count) for s in SYMBOL_SIZES]
        assert keys == sorted(keys)

    def test_mapping_matrix_holds_all_codewords(self):
        """Every size's data area holds exactly its data + check codewords."""
        for size in SYMBOL_SIZES:
            bits = size.mapping_rows * size.mapping_cols
            assert bits // 8 == size.data_codewords + size.ecc_codewords, size

    def test_block_structure_144(self):
        """144x144 splits into 10 interleaved blocks."""
        size = find_symbol_size(144, 144)
        assert size.num_blocks == 10
        assert size.ecc_codewords == 620

    def test_select_smallest(self):
        """Selection picks the first size that fits."""
        assert (select_symbol_size(1).width, select_symbol_size(1).height) == (10, 10)
        assert (select_symbol_size(3).width, select_symbol_size(3).height) == (10, 10)
        assert (select_symbol_size(4).width, select_symbol_size(4).height) == (12, 12)
        assert (select_symbol_size(6).width, select_symbol_size(6).height) == (14, 14)

    def test_select_largest(self):
        """The largest capacity is still selectable."""
        size = select_symbol_size(MAX_DATA_CODEWORDS)
        assert (size.width, size.height) == (144, 144)

    def test_select_too_long(self):
        """Lengths beyond the largest symbol raise."""
        with pytest.raises(ECC200CapacityError) as exc_info:
            select_symbol_size(MAX_DATA_CODEWORDS + 1)
        assert exc_info.value.available == MAX_DATA_CODEWORDS

    def test_find_unknown_size(self):
        """Unknown dimensions are not in the table."""
        assert find_symbol_size(11, 11) is None
        assert find_symbol_size(18, 8).data_codewords == 5


class TestEncodation:
    """Test ASCII encodation and padding."""

    def test_digit_pairs(self):
        """Consecutive digits are packed two per codeword."""
        assert list(ascii_encode(b"123456")) == [142, 164, 186]

    def test_odd_digit_run(self):
        """A trailing single digit is encoded on its own."""
        assert list(ascii_encode(b"123")) == [142, 52]

    def test_plain_ascii(self):
        """ASCII characters are value + 1."""
        assert list(ascii_encode(b"HELLO ")) == [73, 70, 77, 77, 80, 33]

    def test_upper_shift(self):
        """Bytes above 127 use the upper shift."""
        assert list(ascii_encode(b"\xe9")) == [235, 106]

    def test_pad_sequence(self):
        """First pad is 129, later pads are randomized by position."""
        padded = pad_codewords(bytes([73, 70, 77, 77, 80, 33]), 8)
        assert list(padded) == [73, 70, 77, 77, 80, 33, 129, 56]

    def test_pad_exact_fit(self):
        """A full data region gets no padding."""
        assert pad_codewords(b"\x01\x02\x03", 3) == b"\x01\x02\x03"

    def test_pad_overflow(self):
        """Overlong data raises with diagnostic info."""
        with pytest.raises(ECC200CapacityError) as exc_info:
            pad_codewords(b"\x01\x02\x03\x04", 3)
        assert exc_info.value.required == 4
        assert exc_info.value.available == 3


class TestReedSolomon:
    """Test ECC200 check codeword generation."""

    def test_reference_vector(self):
        """'123456' in 10x10 yields the published check codewords."""
        symbol = ecc200_encode(10, 10, b"123456")
        assert list(symbol.codewords) == [142, 164, 186, 114, 25, 5, 88, 102]

    def test_single_error_is_correctable(self):
        """Check codewords let a standard RS decoder repair the block."""
        symbol = ecc200_encode(14, 14, b"HELLO ")
        corrupted = bytearray(symbol.codewords)
        corrupted[2] ^= 0xFF

        codec = RSCodec(10, nsize=255, fcr=1, prim=0x12D, generator=2, c_exp=8)
        decoded = codec.decode(corrupted)
        message = decoded[0] if isinstance(decoded, (tuple, list)) else decoded

        assert bytes(message) == symbol.codewords[:8]

    def test_interleaved_blocks(self):
        """Each interleaved block carries its own valid check codewords."""
        size = find_symbol_size(52, 52)
        data = pad_codewords(ascii_encode(b"interleave me " * 10), size.data_codewords)
        full = add_error_correction(data, size)

        codec = ReedSolomonCodec(size.ecc_block)
        for b in range(size.num_blocks):
            block_data = data[b::size.num_blocks]
            block_ecc = full[size.data_codewords + b::size.num_blocks]
            assert block_ecc == codec.check_codewords(block_data)

    def test_invalid_nsym(self):
        """nsym outside GF(256) limits raises."""
        with pytest.raises(ECC200ConfigurationError):
            ReedSolomonCodec(0)

    def test_wrong_data_length(self):
        """Data must fill the region exactly."""
        with pytest.raises(ECC200EncodingError, match="Expected 3 data codewords"):
            add_error_correction(b"\x01", find_symbol_size(10, 10))


class TestPlacement:
    """Test module placement and finder patterns."""

    @pytest.mark.parametrize("width,height", [(10, 10), (18, 8), (32, 32), (36, 16)])
    def test_finder_and_clock(self, width, height):
        """Solid L on left/bottom, alternating clock on top/right."""
        size = find_symbol_size(width, height)
        payload = b"A" * (size.data_codewords - 1)
        grid = top_down(ecc200_encode(width, height, payload))

        assert grid.shape == (height, width)
        assert grid[:, 0].all()
        assert grid[-1, :].all()
        assert [bool(v) for v in grid[0, :]] == [x % 2 == 0 for x in range(width)]
        assert [bool(v) for v in grid[:, -1]] == [
            (height - 1 - r) % 2 == 0 for r in range(height)
        ]

    def test_mapping_assigns_every_codeword_bit(self):
        """Each codeword number appears exactly 8 times in the mapping matrix."""
        cells = mapping_matrix(8, 8)
        numbers = [int(v) >> 3 for v in cells.reshape(-1) if v > 7]
        assert sorted(set(numbers)) == list(range(1, 9))
        assert all(numbers.count(n) == 8 for n in range(1, 9))

    def test_unfilled_corner(self):
        """12x12 leaves a 2x2 corner with the fixed dark diagonal."""
        cells = mapping_matrix(10, 10)
        assert cells[9, 9] == 1
        assert cells[8, 8] == 1

    def test_bits_read_only(self):
        """Encoder output buffer cannot be modified."""
        symbol = ecc200_encode(None, None, b"HELLO")
        assert not symbol.bits.flags.writeable
        assert symbol.bits.dtype == bool


class TestEncodeEntryPoint:
    """Test ecc200_encode() hints and failure modes."""

    def test_auto_select(self):
        """Without hints the smallest fitting size is used."""
        symbol = ecc200_encode(None, None, b"123456")
        assert (symbol.width, symbol.height) == (10, 10)
        assert symbol.raw_encoded_length == 3
        assert symbol.symbol_capacity == 3
        assert symbol.ecc_bytes == 5

    def test_hint_is_honoured(self):
        """An explicit size is used even when a smaller one would fit."""
        symbol = ecc200_encode(18, 18, b"A")
        assert (symbol.width, symbol.height) == (18, 18)
        assert len(symbol.codewords) == 18 + 14

    def test_payload_length(self):
        """Only payload_length leading bytes are encoded."""
        symbol = ecc200_encode(None, None, b"ABCDEF", 2)
        assert symbol.raw_encoded_length == 2

    def test_invalid_hint(self):
        """A size that is not in the table raises."""
        with pytest.raises(ECC200ConfigurationError, match="Invalid size"):
            ecc200_encode(11, 11, b"A")

    def test_partial_hint(self):
        """Width without height is rejected."""
        with pytest.raises(ECC200ConfigurationError, match="Both width and height"):
            ecc200_encode(10, None, b"A")

    def test_too_long_for_hint_grows(self):
        """Data that does not fit the hinted size moves to the next size."""
        symbol = ecc200_encode(10, 10, b"ABCD")
        assert (symbol.width, symbol.height) == (12, 12)
        assert symbol.raw_encoded_length == 4
        assert symbol.symbol_capacity == 5

    def test_upper_shift_grows_past_hint(self, caplog):
        """High bytes double the codeword count; the override is logged."""
        with caplog.at_level("DEBUG", logger="src.module1_ecc200.encoder"):
            symbol = ecc200_encode(10, 10, b"\xe9\xe9 ")

        assert (symbol.width, symbol.height) == (12, 12)
        assert symbol.raw_encoded_length == 5
        assert "Hint 10x10" in caplog.text

        codec = RSCodec(7, nsize=255, fcr=1, prim=0x12D, generator=2, c_exp=8)
        decoded = codec.decode(symbol.codewords)
        message = decoded[0] if isinstance(decoded, (tuple, list)) else decoded
        assert bytes(message) == bytes([235, 106, 235, 106, 33])

    def test_too_long_for_any_size(self):
        """Streams beyond the largest symbol still raise, even with a hint."""
        with pytest.raises(ECC200CapacityError) as exc_info:
            ecc200_encode(144, 144, b"\xe9" * 800)
        assert exc_info.value.required == 1600
        assert exc_info.value.available == MAX_DATA_CODEWORDS

    def test_non_bytes_payload(self):
        """str payloads are rejected by the primitive."""
        with pytest.raises(ECC200EncodingError, match="must be bytes"):
            ecc200_encode(None, None, "text")

    def test_bad_payload_length(self):
        """payload_length beyond the payload raises."""
        with pytest.raises(ECC200EncodingError):
            ecc200_encode(None, None, b"AB", 5)

    def test_largest_symbol(self):
        """A full 144x144 symbol encodes."""
        symbol = ecc200_encode(144, 144, b"A" * 1558)
        assert symbol.bits.shape == (144 * 144,)
        assert len(symbol.codewords) == 1558 + 620

    def test_deterministic(self):
        """Same input produces the same modules."""
        a = ecc200_encode(None, None, b"deterministic")
        b = ecc200_encode(None, None, b"deterministic")
        assert np.array_equal(a.bits, b.bits)
        assert a.codewords == b.codewords
