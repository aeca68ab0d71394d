import struct

import pytest

from qoi_stream import Header, serialize


def test_header_layout():
    header = Header.build(800, 600, 4)
    data = serialize(header)

    assert len(data) == 14
    assert data[:4] == b"qoif"
    assert data[4:] == struct.pack(">IIBB", 800, 600, 4, 0)


def test_header_round_trip():
    for width, height, channels in [(1, 1, 3), (1920, 1080, 4), (4294967295, 7, 3)]:
        data = Header.build(width, height, channels).to_bytes()
        parsed = Header.from_bytes(data)

        assert len(data) == 14
        assert (parsed.width, parsed.height, parsed.channels) == (width, height, channels)
        assert parsed.colorspace == 0


def test_header_is_big_endian():
    data = Header.build(0x01020304, 0x0A0B0C0D, 3).to_bytes()
    assert data[4:8] == b"\x01\x02\x03\x04"
    assert data[8:12] == b"\x0a\x0b\x0c\x0d"


def test_header_is_immutable():
    header = Header.build(2, 2, 3)
    with pytest.raises(AttributeError):
        header.width = 3


def test_header_parse_errors():
    with pytest.raises(ValueError):
        Header.from_bytes(b"qoif\x00")
    with pytest.raises(ValueError):
        Header.from_bytes(b"png!" + bytes(10))
