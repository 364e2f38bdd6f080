"""
Tests for whole-demo decoding and the trinary result.
"""

import struct

import pytest

from conftest import build_demo, build_header
from hl2demo import (
    DecodeStatus,
    IncompleteDataError,
    MalformedFramingError,
    decode,
    decode_or_raise,
)


def test_single_frame_scenario():
    """Minimal demo: zeroed strings, one three-byte frame, nothing left over."""
    data = (
        b"HL2DEMO\0"
        + struct.pack("<II", 1, 1)
        + b"\0" * (260 * 4)
        + struct.pack("<fIII", 0.0, 0, 1, 0)
        + struct.pack("<III", 10, 10, 3)
        + b"\xaa\xbb\xcc"
    )

    result = decode(data)

    assert result.status is DecodeStatus.COMPLETE
    assert result.demo.header.playback_frames == 1
    assert result.demo.header.server_name == ""
    assert len(result.demo.frames) == 1
    assert result.demo.frames[0].server_frame == 10
    assert result.demo.frames[0].client_frame == 10
    assert result.demo.frames[0].buffer == b"\xaa\xbb\xcc"
    assert result.remaining == b""


def test_frame_count_matches_header(sample_demo_bytes, sample_frames):
    result = decode(sample_demo_bytes)

    assert result.is_complete
    assert result.demo.frame_count == result.demo.header.playback_frames == len(sample_frames)
    for frame, (server_frame, client_frame, payload) in zip(result.demo.frames, sample_frames):
        assert frame.server_frame == server_frame
        assert frame.client_frame == client_frame
        assert frame.buffer == payload
        assert len(frame.buffer) == frame.sub_packet_size
    assert result.demo.total_payload_bytes == 43


def test_trailing_bytes_are_returned(sample_frames):
    demo, remaining = decode_or_raise(build_demo(sample_frames, trailing=b"\x01\x02"))

    assert demo.frame_count == 3
    assert remaining == b"\x01\x02"


def test_declared_count_bounds_decoding():
    """Frames beyond playback_frames are left as trailing bytes."""
    data = build_demo([(1, 1, b"a"), (2, 2, b"b")], playback_frames=1)

    result = decode(data)

    assert result.demo.frame_count == 1
    assert result.remaining == struct.pack("<III", 2, 2, 1) + b"b"


def test_short_buffer_is_incomplete():
    result = decode(build_header()[:100])

    assert result.status is DecodeStatus.INCOMPLETE
    assert isinstance(result.error, IncompleteDataError)
    assert result.needed is not None
    assert result.demo is None


def test_missing_frames_are_incomplete(sample_frames):
    data = build_demo(sample_frames, playback_frames=4)

    result = decode(data)

    assert result.is_incomplete
    assert result.needed == 4


@pytest.mark.parametrize("tail", [b"", b"\0" * 2000, build_header()[8:]])
def test_bad_magic_is_malformed(tail):
    result = decode(b"NOTADEMO" + tail)

    assert result.status is DecodeStatus.MALFORMED
    assert isinstance(result.error, MalformedFramingError)
    assert result.demo is None


def test_decode_or_raise_propagates():
    with pytest.raises(MalformedFramingError):
        decode_or_raise(b"PBDEMS2\0" + b"\0" * 2000)
    with pytest.raises(IncompleteDataError):
        decode_or_raise(b"HL2DEMO\0")


def test_decoding_is_deterministic(sample_demo_bytes):
    first = decode(sample_demo_bytes)
    second = decode(sample_demo_bytes)

    assert first.demo == second.demo
    assert first.remaining == second.remaining


def test_to_dict(sample_demo_bytes):
    as_dict = decode(sample_demo_bytes).demo.to_dict()

    assert as_dict["header"]["map_name"] == "de_dust2"
    assert len(as_dict["frames"]) == 3
    assert as_dict["frames"][0]["preview"] == "aabbcc"
