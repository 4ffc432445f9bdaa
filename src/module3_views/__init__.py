# file: src/module3_views/__init__.py

"""
Module 3: Views

Stateless, read-only materialization of an encoded symbol (Module 2)
as a boolean grid, a '1'/'0' string or a numpy array. Views are
snapshots: re-encoding or destroying the store does not affect them.

Public API:
    - to_grid(symbol) -> list[list[bool]] | None
    - to_bit_string(symbol, separator, trailing_separator) -> str | None
    - to_array(symbol) -> np.ndarray
"""

from .grid import to_grid, to_bit_string, to_array, Grid, DEFAULT_ROW_SEPARATOR

__version__ = "1.0.0"

__all__ = [
    "to_grid",
    "to_bit_string",
    "to_array",
    "Grid",
    "DEFAULT_ROW_SEPARATOR",
]
