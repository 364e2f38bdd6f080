"""Decoder for Source engine HL2DEMO recordings."""

from .demo import Demo, DecodeResult, DecodeStatus, decode, decode_demo, decode_or_raise
from .errors import DemoDecodeError, IncompleteDataError, MalformedFramingError
from .frame import DemoFrame, decode_frame, decode_frames
from .header import DemoHeader, decode_header
from .parser import DemoParser
from .reader import DemoReader
from .stream import DemoStreamDecoder

__all__ = [
    "Demo",
    "DecodeResult",
    "DecodeStatus",
    "DemoDecodeError",
    "DemoFrame",
    "DemoHeader",
    "DemoParser",
    "DemoReader",
    "DemoStreamDecoder",
    "IncompleteDataError",
    "MalformedFramingError",
    "decode",
    "decode_demo",
    "decode_frame",
    "decode_frames",
    "decode_header",
    "decode_or_raise",
]
