from __future__ import annotations

import pytest

from pgmcodec import CodecSettings, PGMType, PGMWriter, decode, dumps, encode, loads, new_buffer

from .helpers import make_pgm


def test_encode_binary_example(example_pgm):
    data = dumps(example_pgm, PGMType.P5)
    assert data == b"P5\n2 2\n255\n\x00\x80\xff\x40"
    decoded = loads(data)
    assert (decoded.width, decoded.height, decoded.max_val) == (2, 2, 255)
    assert list(decoded.data) == [0, 128, 255, 64]


def test_encode_ascii_rows():
    pgm = make_pgm(3, 2, 9, [1, 2, 3, 4, 5, 6])
    assert dumps(pgm, "P2") == b"P2\n3 2\n9\n1 2 3\n4 5 6\n"


def test_encode_binary_truncates_to_low_byte():
    pgm = make_pgm(2, 1, 255, [300, 7])
    assert dumps(pgm, "P5") == b"P5\n2 1\n255\n\x2c\x07"


def test_encode_wide_big_endian():
    pgm = make_pgm(2, 1, 1000, [1000, 1])
    data = dumps(pgm, "P5", CodecSettings(byte_order="big"))
    assert data == b"P5\n2 1\n1000\n\x03\xe8\x00\x01"


def test_encode_wide_little_endian():
    pgm = make_pgm(1, 1, 1000, [1000])
    data = dumps(pgm, "P5", CodecSettings(byte_order="little"))
    assert data == b"P5\n1 1\n1000\n\xe8\x03"


@pytest.mark.parametrize("variant", [PGMType.P2, PGMType.P5])
@pytest.mark.parametrize("max_val, samples", [(255, [0, 1, 254, 255, 17, 90]), (1000, [0, 999, 1000, 256, 4, 512])])
def test_round_trip(variant, max_val, samples):
    pgm = make_pgm(3, 2, max_val, samples)
    decoded = loads(dumps(pgm, variant))
    assert len(decoded.data) == 6
    assert (decoded.width, decoded.height, decoded.max_val) == (3, 2, max_val)
    assert list(decoded.data) == samples


def test_round_trip_big_endian_settings():
    settings = CodecSettings(byte_order="big")
    pgm = make_pgm(2, 1, 65535, [65535, 258])
    assert list(loads(dumps(pgm, "P5", settings), settings).data) == [65535, 258]


def test_encode_to_path(tmp_path, example_pgm):
    path = tmp_path / "out.pgm"
    encode(example_pgm, PGMType.P2, path)
    assert path.read_bytes() == b"P2\n2 2\n255\n0 128\n255 64\n"
    assert list(decode(path).data) == [0, 128, 255, 64]


def test_encode_zero_filled_buffer():
    assert dumps(new_buffer(2, 1, 5), "P2") == b"P2\n2 1\n5\n0 0\n"


def test_unknown_variant(example_pgm):
    with pytest.raises(ValueError):
        dumps(example_pgm, "P6")


def test_encode_unknown_variant_creates_no_file(tmp_path, example_pgm):
    path = tmp_path / "out.pgm"
    with pytest.raises(ValueError):
        encode(example_pgm, "P6", path)
    assert not path.exists()


def test_header_starts_with_magic(example_pgm):
    assert PGMWriter.header(example_pgm, PGMType.P2) == PGMType.P2.magic + b"\n2 2\n255\n"
