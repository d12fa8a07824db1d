from __future__ import annotations

import sys
from array import array

from PIL import Image

from .buffer import new_buffer
from .settings import UINT8_MAX, UINT16_MAX
from .types import PGM

# Pillow's "I;16" mode is little endian regardless of host.
_SWAP_FOR_PIL = sys.byteorder != "little"


def to_image(pgm: PGM) -> Image.Image:
    """Return a Pillow image: mode "L" for 8-bit data, "I;16" otherwise."""
    size = (pgm.width, pgm.height)
    if not pgm.is_wide:
        return Image.frombytes("L", size, bytes(value & 0xFF for value in pgm.data))
    words = array("H", pgm.data)
    if _SWAP_FOR_PIL:
        words.byteswap()
    return Image.frombytes("I;16", size, words.tobytes())


def from_image(img: Image.Image) -> PGM:
    """Build an image from a Pillow image, keeping 16-bit depth for "I;16"."""
    if img.mode == "I;16":
        pgm = new_buffer(img.width, img.height, UINT16_MAX)
        words = array("H")
        words.frombytes(img.tobytes())
        if _SWAP_FOR_PIL:
            words.byteswap()
        pgm.data[:] = words
        return pgm
    if img.mode != "L":
        img = img.convert("L")
    pgm = new_buffer(img.width, img.height, UINT8_MAX)
    pgm.data[:] = array("H", list(img.tobytes()))
    return pgm
