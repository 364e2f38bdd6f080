# header.py

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from .errors import IncompleteDataError, MalformedFramingError
from .reader import STRING_LENGTH, DemoReader

logger = logging.getLogger(__name__)


def dump_bytes(raw_data: bytes) -> str:
    """Dump bytes in a readable hex/ASCII layout for debugging"""
    lines = [f"Size: {len(raw_data)} bytes"]

    for i in range(0, len(raw_data), 16):
        chunk = raw_data[i:i+16]
        hex_values = ' '.join(f'{b:02x}' for b in chunk)
        ascii_values = ''.join(chr(b) if 32 <= b <= 126 else '.' for b in chunk)
        lines.append(f"{i:04x}: {hex_values:48s} {ascii_values}")

        # Blank line every 4 rows
        if i % 64 == 48:
            lines.append("")

    return '\n'.join(lines)


@dataclass(frozen=True)
class DemoHeader:
    """
    HL2DEMO file header.
    References:
    - HL2DEMO format: https://developer.valvesoftware.com/wiki/DEM_Format
    - String fields are 260 bytes (MAX_OSPATH), NUL-terminated
    """

    MAGIC: ClassVar[bytes] = b'HL2DEMO\0'
    MAGIC_SIZE: ClassVar[int] = 8
    STRING_LENGTH: ClassVar[int] = STRING_LENGTH
    HEADER_SIZE: ClassVar[int] = MAGIC_SIZE + 4 + 4 + 4 * STRING_LENGTH + 4 + 4 + 4 + 4  # 1072

    demo_protocol: int
    network_protocol: int
    server_name: str
    client_name: str
    map_name: str
    game_directory: str
    playback_time: float
    playback_ticks: int
    playback_frames: int
    signon_length: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert header to a dictionary format for serialization"""
        return {
            'demo_protocol': self.demo_protocol,
            'network_protocol': self.network_protocol,
            'server_name': self.server_name,
            'client_name': self.client_name,
            'map_name': self.map_name,
            'game_directory': self.game_directory,
            'playback_time': self.playback_time,
            'playback_ticks': self.playback_ticks,
            'playback_frames': self.playback_frames,
            'signon_length': self.signon_length,
        }

    def __str__(self) -> str:
        return (
            f"HL2 Demo (protocol {self.demo_protocol}/{self.network_protocol})\n"
            f"Map: {self.map_name}\n"
            f"Server: {self.server_name}\n"
            f"Duration: {self.playback_time:.2f}s\n"
            f"Ticks: {self.playback_ticks}"
        )


def _check_magic(reader: DemoReader) -> None:
    magic = DemoHeader.MAGIC
    available = reader.rest()[:len(magic)]

    # A short prefix that still matches can be completed by more data
    if available != magic[:len(available)]:
        logger.error("Bad demo magic. Leading bytes:\n" + dump_bytes(available))
        raise MalformedFramingError(available)
    if len(available) < len(magic):
        raise IncompleteDataError(len(magic) - len(available), reader.position, "magic")

    reader.read_bytes(len(magic), "magic")


def decode_header(reader: DemoReader) -> DemoHeader:
    """Decode the fixed-size demo header at the reader's cursor.

    Raises MalformedFramingError when the magic does not match and
    IncompleteDataError when the buffer ends inside the header.
    """
    _check_magic(reader)

    demo_protocol = reader.read_u32("demo_protocol")
    network_protocol = reader.read_u32("network_protocol")
    logger.debug(f"Protocols - Demo: {demo_protocol}, Network: {network_protocol}")

    header = DemoHeader(
        demo_protocol=demo_protocol,
        network_protocol=network_protocol,
        server_name=reader.read_fixed_string(what="server_name"),
        client_name=reader.read_fixed_string(what="client_name"),
        map_name=reader.read_fixed_string(what="map_name"),
        game_directory=reader.read_fixed_string(what="game_directory"),
        playback_time=reader.read_f32("playback_time"),
        playback_ticks=reader.read_u32("playback_ticks"),
        playback_frames=reader.read_u32("playback_frames"),
        signon_length=reader.read_u32("signon_length"),
    )
    logger.info(
        f"Decoded header: map '{header.map_name}', "
        f"{header.playback_frames} frames, {header.playback_ticks} ticks"
    )
    return header
