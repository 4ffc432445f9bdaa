# file: src/module1_ecc200/symbol_sizes.py

"""
ECC200 symbol size table.

Every supported Data Matrix size with its data region layout and
Reed-Solomon block structure. The table order is canonical: ascending
data capacity, smallest module count first among equal capacities.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ECC200CapacityError, ECC200ConfigurationError


@dataclass(frozen=True)
class SymbolSize:
    """One row of the ECC200 size table."""
    height: int
    width: int
    region_height: int  # including the 2-module finder/clock border
    region_width: int
    data_codewords: int
    data_block: int
    ecc_block: int

    @property
    def num_blocks(self) -> int:
        # 144x144 splits into 8 blocks of 156 and 2 of 155
        return (self.data_codewords + 2) // self.data_block

    @property
    def ecc_codewords(self) -> int:
        return self.num_blocks * self.ecc_block

    @property
    def mapping_rows(self) -> int:
        """Rows of the mapping matrix (symbol without finder/clock borders)."""
        return self.height - 2 * (self.height // self.region_height)

    @property
    def mapping_cols(self) -> int:
        """Columns of the mapping matrix."""
        return self.width - 2 * (self.width // self.region_width)

    @property
    def module_count(self) -> int:
        return self.width * self.height


SYMBOL_SIZES: Tuple[SymbolSize, ...] = (
    SymbolSize(10, 10, 10, 10, 3, 3, 5),
    SymbolSize(12, 12, 12, 12, 5, 5, 7),
    SymbolSize(8, 18, 8, 18, 5, 5, 7),
    SymbolSize(14, 14, 14, 14, 8, 8, 10),
    SymbolSize(8, 32, 8, 16, 10, 10, 11),
    SymbolSize(16, 16, 16, 16, 12, 12, 12),
    SymbolSize(12, 26, 12, 26, 16, 16, 14),
    SymbolSize(18, 18, 18, 18, 18, 18, 14),
    SymbolSize(20, 20, 20, 20, 22, 22, 18),
    SymbolSize(12, 36, 12, 18, 22, 22, 18),
    SymbolSize(22, 22, 22, 22, 30, 30, 20),
    SymbolSize(16, 36, 16, 18, 32, 32, 24),
    SymbolSize(24, 24, 24, 24, 36, 36, 24),
    SymbolSize(26, 26, 26, 26, 44, 44, 28),
    SymbolSize(16, 48, 16, 24, 49, 49, 28),
    SymbolSize(32, 32, 16, 16, 62, 62, 36),
    SymbolSize(36, 36, 18, 18, 86, 86, 42),
    SymbolSize(40, 40, 20, 20, 114, 114, 48),
    SymbolSize(44, 44, 22, 22, 144, 144, 56),
    SymbolSize(48, 48, 24, 24, 174, 174, 68),
    SymbolSize(52, 52, 26, 26, 204, 102, 42),
    SymbolSize(64, 64, 16, 16, 280, 140, 56),
    SymbolSize(72, 72, 18, 18, 368, 92, 36),
    SymbolSize(80, 80, 20, 20, 456, 114, 48),
    SymbolSize(88, 88, 22, 22, 576, 144, 56),
    SymbolSize(96, 96, 24, 24, 696, 174, 68),
    SymbolSize(104, 104, 26, 26, 816, 136, 56),
    SymbolSize(120, 120, 20, 20, 1050, 175, 68),
    SymbolSize(132, 132, 22, 22, 1304, 163, 62),
    SymbolSize(144, 144, 24, 24, 1558, 156, 62),
)

MAX_DATA_CODEWORDS = SYMBOL_SIZES[-1].data_codewords


def select_symbol_size(length: int) -> SymbolSize:
    """
    Pick the first size in canonical order that holds `length` codewords.

    Args:
        length: Number of data codewords (or payload bytes) to fit

    Returns:
        Smallest suitable SymbolSize

    Raises:
        ECC200CapacityError: If no size is large enough
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    for size in SYMBOL_SIZES:
        if size.data_codewords >= length:
            return size

    raise ECC200CapacityError(
        f"{length} codewords exceed the largest symbol ({MAX_DATA_CODEWORDS})",
        required=length,
        available=MAX_DATA_CODEWORDS,
    )


def find_symbol_size(width: int, height: int) -> Optional[SymbolSize]:
    """Look up the table entry for an explicit (width, height), or None."""
    for size in SYMBOL_SIZES:
        if size.width == width and size.height == height:
            return size
    return None
