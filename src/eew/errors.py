"""
Errors raised while decoding EEW telegrams.
"""

from typing import Optional


class FormatError(ValueError):
    """
    Raised when part of a telegram does not match its expected format.

    Attributes:
        field: Name of the field that failed to decode
        raw: The raw text of that field, if available
    """

    def __init__(self, field: str, raw: Optional[str] = None, message: Optional[str] = None):
        self.field = field
        self.raw = raw
        if message is None:
            message = f"Invalid telegram format ({field}: {raw!r})"
        super().__init__(message)
