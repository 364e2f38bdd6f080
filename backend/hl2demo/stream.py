# stream.py

import logging
from typing import Optional

from .demo import DecodeResult, decode

logger = logging.getLogger(__name__)


class DemoStreamDecoder:
    """Decode a demo that arrives in chunks (a download or a live recording).

    Each feed re-decodes the buffered bytes from the start. Once a result is
    complete or malformed it is final and later chunks are ignored.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._result: Optional[DecodeResult] = None

    @property
    def buffered(self) -> int:
        return len(self._buffer)

    @property
    def finished(self) -> bool:
        return self._result is not None and not self._result.is_incomplete

    def feed(self, chunk: bytes) -> DecodeResult:
        if self.finished:
            return self._result

        self._buffer.extend(chunk)
        self._result = decode(bytes(self._buffer))

        if self._result.is_incomplete:
            logger.debug(f"Buffered {len(self._buffer)} bytes, need {self._result.needed} more")
        else:
            logger.info(f"Stream finished ({self._result.status.value}) after {len(self._buffer)} bytes")
        return self._result

    def reset(self) -> None:
        self._buffer.clear()
        self._result = None
