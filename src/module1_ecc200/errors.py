# file: src/module1_ecc200/errors.py

"""
ECC200-specific exception hierarchy.

All exceptions inherit from ECC200Error for unified handling.
"""


class ECC200Error(Exception):
    """Base exception for all ECC200 encoding errors."""
    pass


class ECC200EncodingError(ECC200Error):
    """Raised when encoding fails."""
    pass


class ECC200CapacityError(ECC200EncodingError):
    """Raised when the encoded data does not fit the symbol."""

    def __init__(self, message: str, required: int = None, available: int = None):
        super().__init__(message)
        self.required = required
        self.available = available


class ECC200ConfigurationError(ECC200Error):
    """Raised when a symbol size or Reed-Solomon parameter is invalid."""
    pass
