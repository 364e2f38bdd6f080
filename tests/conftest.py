"""
Shared builders for HL2DEMO test buffers.
"""

import struct

import pytest

MAGIC = b"HL2DEMO\0"


def fixed_string(text, width=260):
    raw = text if isinstance(text, bytes) else text.encode("utf-8")
    return raw[:width].ljust(width, b"\0")


def build_header(
    demo_protocol=3,
    network_protocol=24,
    server_name="localhost:27015",
    client_name="player",
    map_name="de_dust2",
    game_directory="cstrike",
    playback_time=12.5,
    playback_ticks=825,
    playback_frames=0,
    signon_length=0,
    magic=MAGIC,
):
    return (
        magic
        + struct.pack("<II", demo_protocol, network_protocol)
        + fixed_string(server_name)
        + fixed_string(client_name)
        + fixed_string(map_name)
        + fixed_string(game_directory)
        + struct.pack("<fIII", playback_time, playback_ticks, playback_frames, signon_length)
    )


def build_frame(server_frame, client_frame, payload):
    return struct.pack("<III", server_frame, client_frame, len(payload)) + payload


def build_demo(frames, trailing=b"", **header_fields):
    header_fields.setdefault("playback_frames", len(frames))
    body = b"".join(build_frame(*frame) for frame in frames)
    return build_header(**header_fields) + body + trailing


@pytest.fixture
def sample_frames():
    return [
        (10, 10, b"\xaa\xbb\xcc"),
        (11, 11, b""),
        (12, 13, bytes(range(40))),
    ]


@pytest.fixture
def sample_demo_bytes(sample_frames):
    return build_demo(sample_frames)


@pytest.fixture
def demo_file(tmp_path, sample_demo_bytes):
    path = tmp_path / "sample.dem"
    path.write_bytes(sample_demo_bytes)
    return path
