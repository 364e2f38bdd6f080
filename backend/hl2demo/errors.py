# errors.py

from typing import Optional


class DemoDecodeError(Exception):
    """Base exception for demo decoding errors"""
    pass


class MalformedFramingError(DemoDecodeError):
    """The buffer does not start with the HL2DEMO magic"""

    def __init__(self, magic: bytes, message: Optional[str] = None):
        self.magic = magic
        super().__init__(message or f"Invalid demo file magic: {magic!r} (hex: {magic.hex()})")


class IncompleteDataError(DemoDecodeError):
    """Not enough bytes to finish the current field or frame.

    Recoverable: feed more data and decode again.
    """

    def __init__(self, needed: int, offset: int, what: str = "data"):
        self.needed = needed
        self.offset = offset
        self.what = what
        super().__init__(f"Incomplete {what} at offset {offset}: need {needed} more byte(s)")
