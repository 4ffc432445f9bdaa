# file: src/module1_ecc200/placement.py

"""
Module placement for ECC200 symbols.

Lays the codeword stream out in the mapping matrix with the diagonal
"utah" pattern and the four corner special cases, then wraps every data
region in its finder (solid) and clock (alternating) borders.

The output buffer is row-major with the BOTTOM row first:
    index = row * width + col, row 0 = bottom edge (solid finder line)
"""

import numpy as np

from .symbol_sizes import SymbolSize

# Mapping matrix cell values: 0 = unassigned, 1 = fixed dark module,
# otherwise (codeword_number << 3) + bit with codeword numbers from 1.
_UNASSIGNED = 0
_FIXED_DARK = 1


class _MappingMatrix:
    """Codeword/bit assignment for the data area of one symbol size."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.cells = np.zeros((rows, cols), dtype=np.int32)

    def module(self, r: int, c: int, codeword: int, bit: int):
        if r < 0:
            r += self.rows
            c += 4 - ((self.rows + 4) % 8)
        if c < 0:
            c += self.cols
            r += 4 - ((self.cols + 4) % 8)
        self.cells[r, c] = (codeword << 3) + bit

    def utah(self, r: int, c: int, codeword: int):
        self.module(r - 2, c - 2, codeword, 7)
        self.module(r - 2, c - 1, codeword, 6)
        self.module(r - 1, c - 2, codeword, 5)
        self.module(r - 1, c - 1, codeword, 4)
        self.module(r - 1, c, codeword, 3)
        self.module(r, c - 2, codeword, 2)
        self.module(r, c - 1, codeword, 1)
        self.module(r, c, codeword, 0)

    def corner_a(self, codeword: int):
        nr, nc = self.rows, self.cols
        self.module(nr - 1, 0, codeword, 7)
        self.module(nr - 1, 1, codeword, 6)
        self.module(nr - 1, 2, codeword, 5)
        self.module(0, nc - 2, codeword, 4)
        self.module(0, nc - 1, codeword, 3)
        self.module(1, nc - 1, codeword, 2)
        self.module(2, nc - 1, codeword, 1)
        self.module(3, nc - 1, codeword, 0)

    def corner_b(self, codeword: int):
        nr, nc = self.rows, self.cols
        self.module(nr - 3, 0, codeword, 7)
        self.module(nr - 2, 0, codeword, 6)
        self.module(nr - 1, 0, codeword, 5)
        self.module(0, nc - 4, codeword, 4)
        self.module(0, nc - 3, codeword, 3)
        self.module(0, nc - 2, codeword, 2)
        self.module(0, nc - 1, codeword, 1)
        self.module(1, nc - 1, codeword, 0)

    def corner_c(self, codeword: int):
        nr, nc = self.rows, self.cols
        self.module(nr - 3, 0, codeword, 7)
        self.module(nr - 2, 0, codeword, 6)
        self.module(nr - 1, 0, codeword, 5)
        self.module(0, nc - 2, codeword, 4)
        self.module(0, nc - 1, codeword, 3)
        self.module(1, nc - 1, codeword, 2)
        self.module(2, nc - 1, codeword, 1)
        self.module(3, nc - 1, codeword, 0)

    def corner_d(self, codeword: int):
        nr, nc = self.rows, self.cols
        self.module(nr - 1, 0, codeword, 7)
        self.module(nr - 1, nc - 1, codeword, 6)
        self.module(0, nc - 3, codeword, 5)
        self.module(0, nc - 2, codeword, 4)
        self.module(0, nc - 1, codeword, 3)
        self.module(1, nc - 3, codeword, 2)
        self.module(1, nc - 2, codeword, 1)
        self.module(1, nc - 1, codeword, 0)

    def fill(self):
        """Run the placement walk over the whole matrix."""
        nr, nc = self.rows, self.cols
        cells = self.cells
        codeword = 1
        r, c = 4, 0

        while True:
            if r == nr and c == 0:
                self.corner_a(codeword)
                codeword += 1
            if r == nr - 2 and c == 0 and nc % 4:
                self.corner_b(codeword)
                codeword += 1
            if r == nr - 2 and c == 0 and nc % 8 == 4:
                self.corner_c(codeword)
                codeword += 1
            if r == nr + 4 and c == 2 and nc % 8 == 0:
                self.corner_d(codeword)
                codeword += 1

            # sweep up and to the right
            while True:
                if r < nr and c >= 0 and cells[r, c] == _UNASSIGNED:
                    self.utah(r, c, codeword)
                    codeword += 1
                r -= 2
                c += 2
                if not (r >= 0 and c < nc):
                    break
            r += 1
            c += 3

            # sweep down and to the left
            while True:
                if r >= 0 and c < nc and cells[r, c] == _UNASSIGNED:
                    self.utah(r, c, codeword)
                    codeword += 1
                r += 2
                c -= 2
                if not (r < nr and c >= 0):
                    break
            r += 3
            c += 1

            if not (r < nr or c < nc):
                break

        if cells[nr - 1, nc - 1] == _UNASSIGNED:
            cells[nr - 1, nc - 1] = _FIXED_DARK
            cells[nr - 2, nc - 2] = _FIXED_DARK

        return cells


def mapping_matrix(rows: int, cols: int) -> np.ndarray:
    """Codeword/bit assignment for a rows x cols mapping matrix (top row first)."""
    return _MappingMatrix(rows, cols).fill()


def place_modules(codewords: bytes, size: SymbolSize) -> np.ndarray:
    """
    Build the module buffer for a complete symbol.

    Args:
        codewords: Data plus check codewords, in stream order
        size: Symbol size the codewords were produced for

    Returns:
        Flat boolean array of width * height modules, bottom row first
    """
    width, height = size.width, size.height
    fh, fw = size.region_height, size.region_width
    grid = np.zeros((height, width), dtype=bool)

    # finder (solid) and clock (alternating) borders, bottom-up coordinates
    for y in range(0, height, fh):
        grid[y, :] = True
        grid[y + fh - 1, 0::2] = True
    for x in range(0, width, fw):
        grid[:, x] = True
        grid[0::2, x + fw - 1] = True

    cells = mapping_matrix(size.mapping_rows, size.mapping_cols)
    nr, nc = cells.shape

    for y in range(nr):
        for x in range(nc):
            v = int(cells[nr - y - 1, x])
            if v == _FIXED_DARK:
                dark = True
            elif v > 7:
                dark = bool(codewords[(v >> 3) - 1] & (1 << (v & 7)))
            else:
                dark = False
            if dark:
                gy = 1 + y + 2 * (y // (fh - 2))
                gx = 1 + x + 2 * (x // (fw - 2))
                grid[gy, gx] = True

    return grid.reshape(-1)
