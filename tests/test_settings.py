from __future__ import annotations

import sys

import pytest

from pgmcodec import CodecSettings


def test_default_is_native_order():
    assert CodecSettings().byte_order == "native"
    assert not CodecSettings().needs_swap


def test_swap_only_against_host_order():
    other = "big" if sys.byteorder == "little" else "little"
    assert CodecSettings(byte_order=other).needs_swap
    assert not CodecSettings(byte_order=sys.byteorder).needs_swap


def test_unknown_byte_order():
    with pytest.raises(ValueError):
        CodecSettings(byte_order="middle")
