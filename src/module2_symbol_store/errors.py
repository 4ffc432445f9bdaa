# file: src/module2_symbol_store/errors.py

"""
Symbol store exception hierarchy.

All exceptions inherit from SymbolError for unified handling.
"""


class SymbolError(Exception):
    """Base exception for all symbol lifecycle errors."""
    pass


class InvalidInputError(SymbolError):
    """Raised when a payload is missing, empty or not convertible to bytes."""
    pass


class EncodingFailedError(SymbolError):
    """Raised when the encoder finds no valid symbol for the payload."""

    def __init__(
        self,
        message: str,
        payload_length: int = None,
        width_hint: int = None,
        height_hint: int = None
    ):
        super().__init__(message)
        self.payload_length = payload_length
        self.width_hint = width_hint
        self.height_hint = height_hint


class UseBeforeEncodeError(SymbolError):
    """Raised when a strict accessor needs a symbol but the store is empty."""
    pass


class SymbolConfigurationError(SymbolError):
    """Raised when configuration is invalid."""
    pass
