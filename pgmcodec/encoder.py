from __future__ import annotations

import io
import logging
import os
from array import array
from typing import BinaryIO, Optional, Union

from .settings import CodecSettings
from .types import PGM, PGMType

logger = logging.getLogger(__name__)


class PGMWriter:
    def __init__(self, settings: Optional[CodecSettings] = None) -> None:
        self.settings = settings or CodecSettings()

    def write(self, pgm: PGM, variant: Union[PGMType, str], stream: BinaryIO) -> None:
        variant = PGMType.parse(variant)
        stream.write(self.header(pgm, variant))
        if variant is PGMType.P2:
            stream.write(self._ascii_data(pgm))
        else:
            stream.write(self._binary_data(pgm))
        logger.debug(
            "Encoded %s image %dx%d max_val=%d", variant.value, pgm.width, pgm.height, pgm.max_val
        )

    @staticmethod
    def header(pgm: PGM, variant: PGMType) -> bytes:
        """Build the three header lines: magic, dimensions and max_val."""
        text = f"\n{pgm.width} {pgm.height}\n{pgm.max_val}\n"
        return variant.magic + text.encode("ascii")

    @staticmethod
    def _ascii_data(pgm: PGM) -> bytes:
        width = pgm.width
        out = bytearray()
        for row in range(pgm.height):
            line = pgm.data[row * width : (row + 1) * width]
            out += " ".join(str(value) for value in line).encode("ascii")
            out += b"\n"
        return bytes(out)

    def _binary_data(self, pgm: PGM) -> bytes:
        if not pgm.is_wide:
            # Samples above 255 are truncated, not clamped.
            return bytes(value & 0xFF for value in pgm.data)
        words = array("H", pgm.data)
        if self.settings.needs_swap:
            words.byteswap()
        return words.tobytes()


def write_pgm(
    pgm: PGM,
    variant: Union[PGMType, str],
    stream: BinaryIO,
    settings: Optional[CodecSettings] = None,
) -> None:
    PGMWriter(settings).write(pgm, variant, stream)


def dumps(pgm: PGM, variant: Union[PGMType, str], settings: Optional[CodecSettings] = None) -> bytes:
    buffer = io.BytesIO()
    write_pgm(pgm, variant, buffer, settings)
    return buffer.getvalue()


def encode(
    pgm: PGM,
    variant: Union[PGMType, str],
    path: Union[str, os.PathLike],
    settings: Optional[CodecSettings] = None,
) -> None:
    """Write the image to path in the requested variant."""
    # Parsed before opening so a bad variant leaves no file behind.
    variant = PGMType.parse(variant)
    with open(path, "wb") as handle:
        write_pgm(pgm, variant, handle, settings)
