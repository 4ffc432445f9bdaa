# file: src/module3_views/grid.py

"""
Grid and string views over an encoded symbol.

Every function is pure: it reads the symbol's module buffer, which is
stored bottom row first, and returns a fresh top-row-first copy. Nothing
is cached on the symbol and no result aliases its buffer.
"""

from typing import List, Optional

import numpy as np

from src.module2_symbol_store import Symbol, UseBeforeEncodeError

Grid = List[List[bool]]

DEFAULT_ROW_SEPARATOR = ","


def _top_down(symbol: Symbol) -> np.ndarray:
    """(height, width) view of the modules with row 0 = top row."""
    return np.flipud(symbol.bits.reshape(symbol.height, symbol.width))


def to_grid(symbol: Optional[Symbol]) -> Optional[Grid]:
    """
    Materialize the symbol as rows of booleans.

    Args:
        symbol: Encoded symbol, or None for an empty store

    Returns:
        `height` lists of `width` bools, top row first, or None if empty
    """
    if symbol is None:
        return None
    return _top_down(symbol).tolist()


def to_bit_string(
    symbol: Optional[Symbol],
    separator: str = DEFAULT_ROW_SEPARATOR,
    trailing_separator: bool = True
) -> Optional[str]:
    """
    Serialize the symbol as '1'/'0' rows.

    Rows are emitted top row first, each followed by `separator`. The
    separator after the last row is kept unless `trailing_separator`
    is False.

    Example:
        A 2x2 symbol with the top-left and bottom-right modules set
        serializes as "10,01,".
    """
    if symbol is None:
        return None

    rows = ["".join("1" if bit else "0" for bit in row) for row in _top_down(symbol)]
    text = separator.join(rows)
    if trailing_separator:
        text += separator
    return text


def to_array(symbol: Optional[Symbol]) -> np.ndarray:
    """
    Copy of the modules as a writable (height, width) bool array, top row first.

    Raises:
        UseBeforeEncodeError: If there is no symbol
    """
    if symbol is None:
        raise UseBeforeEncodeError("Cannot build an array view before encoding")
    return np.array(_top_down(symbol), dtype=bool, copy=True)
