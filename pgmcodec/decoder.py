from __future__ import annotations

import io
import logging
import os
from array import array
from typing import BinaryIO, Optional, Tuple, Union

from .buffer import allocate_samples
from .errors import FormatError, PGMIOError
from .settings import UINT8_MAX, UINT16_MAX, WHITESPACE, CodecSettings
from .types import PGM, PGMType

logger = logging.getLogger(__name__)

_VARIANTS = {b"2": PGMType.P2, b"5": PGMType.P5}


class _Scanner:
    """Byte reader with a single byte of pushback, enough for scanf-style parsing."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pending = b""

    def getc(self) -> bytes:
        if self._pending:
            c, self._pending = self._pending, b""
            return c
        return self._stream.read(1)

    def ungetc(self, c: bytes) -> None:
        self._pending = c

    def read(self, count: int) -> bytes:
        head, self._pending = self._pending[:count], self._pending[count:]
        if count <= len(head):
            return head
        return head + self._stream.read(count - len(head))

    def read_rest(self) -> bytes:
        head, self._pending = self._pending, b""
        return head + self._stream.read()

    def skip_whitespace(self) -> bytes:
        """Consume a whitespace run and return the first other byte (b"" at end)."""
        c = self.getc()
        while c and c in WHITESPACE:
            c = self.getc()
        return c

    def read_uint(self, what: str) -> int:
        c = self.skip_whitespace()
        digits = bytearray()
        while c and c.isdigit():
            digits += c
            c = self.getc()
        if c:
            self.ungetc(c)
        if not digits:
            found = f"found {c!r}" if c else "reached end of stream"
            raise PGMIOError(f"Expected {what}, {found}")
        value = int(digits)
        if value > UINT16_MAX:
            raise PGMIOError(f"{what} {value} does not fit 16 bits")
        return value


class PGMReader:
    def __init__(self, settings: Optional[CodecSettings] = None) -> None:
        self.settings = settings or CodecSettings()

    def read(self, stream: BinaryIO) -> PGM:
        scanner = _Scanner(stream)
        variant = self._read_magic(scanner)
        width, height, max_val = self._read_header(scanner)
        data = allocate_samples(width * height)
        if variant is PGMType.P2:
            self._read_ascii(scanner, data)
        else:
            self._read_binary(scanner, data, max_val)
        logger.debug("Decoded %s image %dx%d max_val=%d", variant.value, width, height, max_val)
        return PGM(width, height, max_val, data)

    @staticmethod
    def _read_magic(scanner: _Scanner) -> PGMType:
        c = scanner.getc()
        if not c:
            raise PGMIOError("Empty stream")
        if c != b"P":
            raise FormatError("Not a PGM file")
        c = scanner.getc()
        variant = _VARIANTS.get(c)
        if variant is None:
            raise FormatError(f"Unsupported PGM variant: P{c.decode('latin-1')}")
        return variant

    @staticmethod
    def _read_header(scanner: _Scanner) -> Tuple[int, int, int]:
        # Dimensions must follow the magic, so running out here is a format problem.
        c = scanner.skip_whitespace()
        if not c:
            raise FormatError("Missing PGM header after magic number")
        scanner.ungetc(c)

        width = scanner.read_uint("width")
        height = scanner.read_uint("height")
        max_val = scanner.read_uint("max_val")
        if max_val == 0:
            raise FormatError("max_val must be greater than zero")

        # Exactly one separator byte; its class is not checked.
        if not scanner.getc():
            raise PGMIOError("Missing separator before sample data")
        return width, height, max_val

    @staticmethod
    def _read_ascii(scanner: _Scanner, data: array) -> None:
        size = len(data)
        if not size:
            return
        tokens = scanner.read_rest().split(maxsplit=size)
        if len(tokens) < size:
            raise PGMIOError(f"Expected {size} samples, found {len(tokens)}")
        for i in range(size):
            token = tokens[i]
            if not token.isdigit():
                raise PGMIOError(f"Invalid sample {token!r}")
            value = int(token)
            if value > UINT16_MAX:
                raise PGMIOError(f"Sample {value} does not fit 16 bits")
            data[i] = value

    def _read_binary(self, scanner: _Scanner, data: array, max_val: int) -> None:
        size = len(data)
        if max_val <= UINT8_MAX:
            raw = scanner.read(size)
            if len(raw) != size:
                raise PGMIOError(f"Expected {size} bytes of samples, found {len(raw)}")
            data[:] = array("H", list(raw))
            return
        raw = scanner.read(size * data.itemsize)
        if len(raw) != size * data.itemsize:
            raise PGMIOError(f"Expected {size * data.itemsize} bytes of samples, found {len(raw)}")
        words = array("H")
        words.frombytes(raw)
        if self.settings.needs_swap:
            words.byteswap()
        data[:] = words


def read_pgm(stream: BinaryIO, settings: Optional[CodecSettings] = None) -> PGM:
    return PGMReader(settings).read(stream)


def loads(data: bytes, settings: Optional[CodecSettings] = None) -> PGM:
    return read_pgm(io.BytesIO(data), settings)


def decode(path: Union[str, os.PathLike], settings: Optional[CodecSettings] = None) -> PGM:
    """Read a P2 or P5 file into a new image."""
    with open(path, "rb") as handle:
        return read_pgm(handle, settings)
