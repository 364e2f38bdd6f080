# demo.py

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .errors import DemoDecodeError, IncompleteDataError, MalformedFramingError
from .frame import DemoFrame, decode_frames
from .header import DemoHeader, decode_header
from .reader import DemoReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Demo:
    """A decoded demo: the header plus every frame it declares"""
    header: DemoHeader
    frames: Tuple[DemoFrame, ...]

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def total_payload_bytes(self) -> int:
        return sum(frame.sub_packet_size for frame in self.frames)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'header': self.header.to_dict(),
            'frames': [frame.to_dict() for frame in self.frames],
        }


class DecodeStatus(Enum):
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of a decode: a finished demo, a request for more data, or a fatal error"""
    status: DecodeStatus
    demo: Optional[Demo] = None
    remaining: bytes = field(default=b'', repr=False)
    error: Optional[DemoDecodeError] = None
    needed: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.status is DecodeStatus.COMPLETE

    @property
    def is_incomplete(self) -> bool:
        return self.status is DecodeStatus.INCOMPLETE

    @property
    def is_malformed(self) -> bool:
        return self.status is DecodeStatus.MALFORMED


def decode_demo(reader: DemoReader) -> Demo:
    """Decode the header, then exactly header.playback_frames frames"""
    header = decode_header(reader)
    frames = decode_frames(reader, header.playback_frames)
    return Demo(header=header, frames=frames)


def decode_or_raise(data: bytes) -> Tuple[Demo, bytes]:
    """Decode a demo buffer, returning the demo and any unconsumed bytes.

    Raises IncompleteDataError or MalformedFramingError.
    """
    reader = DemoReader(data)
    demo = decode_demo(reader)
    remaining = reader.rest()
    if remaining:
        logger.debug(f"{len(remaining)} trailing bytes after last frame")
    return demo, remaining


def decode(data: bytes) -> DecodeResult:
    """Decode a demo buffer without raising for decode failures"""
    try:
        demo, remaining = decode_or_raise(data)
    except IncompleteDataError as e:
        logger.debug(f"Need more data: {e}")
        return DecodeResult(DecodeStatus.INCOMPLETE, error=e, needed=e.needed)
    except MalformedFramingError as e:
        logger.warning(f"Malformed demo: {e}")
        return DecodeResult(DecodeStatus.MALFORMED, error=e)

    return DecodeResult(DecodeStatus.COMPLETE, demo=demo, remaining=remaining)
