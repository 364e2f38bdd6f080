# reader.py

import struct
from typing import Optional

from .errors import IncompleteDataError

STRING_LENGTH = 260

_U32 = struct.Struct('<I')
_F32 = struct.Struct('<f')


class DemoReader:
    """Little-endian cursor over an immutable demo buffer"""

    __slots__ = ('_data', '_pos')

    def __init__(self, data: bytes, pos: int = 0):
        self._data = bytes(data)
        self._pos = pos

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def rest(self) -> bytes:
        """Unconsumed bytes after the cursor"""
        return self._data[self._pos:]

    def _require(self, size: int, what: str) -> None:
        if self.remaining < size:
            raise IncompleteDataError(size - self.remaining, self._pos, what)

    def peek_u32(self) -> Optional[int]:
        if self.remaining < 4:
            return None
        return _U32.unpack_from(self._data, self._pos)[0]

    def read_u32(self, what: str = "u32") -> int:
        self._require(4, what)
        value = _U32.unpack_from(self._data, self._pos)[0]
        self._pos += 4
        return value

    def read_f32(self, what: str = "f32") -> float:
        self._require(4, what)
        value = _F32.unpack_from(self._data, self._pos)[0]
        self._pos += 4
        return value

    def read_bytes(self, size: int, what: str = "bytes") -> bytes:
        self._require(size, what)
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk

    def read_fixed_string(self, width: int = STRING_LENGTH, what: str = "string") -> str:
        """Read a fixed-width, NUL-terminated text field.

        Always consumes ``width`` bytes. Text stops at the first NUL (or runs
        the whole field when there is none) and undecodable bytes are replaced.
        """
        raw = self.read_bytes(width, what)
        return raw.split(b'\0', 1)[0].decode('utf-8', errors='replace')
