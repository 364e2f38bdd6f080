# frame.py

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Tuple

from .reader import DemoReader

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 1000


@dataclass(frozen=True)
class DemoFrame:
    """One frame record: two frame counters plus the raw sub packet"""
    server_frame: int
    client_frame: int
    sub_packet_size: int
    buffer: bytes

    PREVIEW_SIZE: ClassVar[int] = 16

    def to_dict(self) -> Dict[str, Any]:
        return {
            'server_frame': self.server_frame,
            'client_frame': self.client_frame,
            'sub_packet_size': self.sub_packet_size,
            'preview': self.buffer[:self.PREVIEW_SIZE].hex(),
        }


def _debug_bytes(data: bytes, description: str, preview_size: int = 32) -> None:
    """Debug helper to log byte content"""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    preview = data[:preview_size]
    hex_str = ' '.join(f'{b:02x}' for b in preview)
    ascii_str = ''.join(chr(b) if 32 <= b <= 126 else '.' for b in preview)
    logger.debug(f"{description} - Hex: {hex_str}, ASCII: {ascii_str}")


def decode_frame(reader: DemoReader) -> DemoFrame:
    """Decode one frame envelope and its payload"""
    server_frame = reader.read_u32("server_frame")
    client_frame = reader.read_u32("client_frame")
    sub_packet_size = reader.read_u32("sub_packet_size")
    buffer = reader.read_bytes(sub_packet_size, "sub packet")

    return DemoFrame(
        server_frame=server_frame,
        client_frame=client_frame,
        sub_packet_size=sub_packet_size,
        buffer=buffer,
    )


def decode_frames(reader: DemoReader, count: int) -> Tuple[DemoFrame, ...]:
    """Decode exactly ``count`` consecutive frames.

    Any failure propagates; a partial sequence is never returned.
    """
    frames = []

    for index in range(count):
        # Peeked but never consumed: the frame envelope starts at this same offset.
        command = reader.peek_u32()
        logger.debug(f"Frame {index} at offset {reader.position}, command tag {command}")

        frame = decode_frame(reader)
        _debug_bytes(frame.buffer, f"Frame {index} payload ({frame.sub_packet_size} bytes)")
        frames.append(frame)

        if (index + 1) % PROGRESS_INTERVAL == 0:
            logger.debug(f"Processed {index + 1} frames...")

    logger.debug(f"Finished decoding {len(frames)} frames")
    return tuple(frames)
