from __future__ import annotations


class PGMError(Exception):
    """Base class for all pgmcodec errors."""


class FormatError(PGMError, ValueError):
    """The stream is not a structurally valid PGM."""


class PGMIOError(PGMError, OSError):
    """Unexpected end of stream or unreadable integer in header or data."""


class AllocationError(PGMError, MemoryError):
    """Sample storage could not be allocated."""


class BoundsError(PGMError, IndexError):
    """Pixel coordinate outside of the image."""

    def __init__(self, row: int, column: int, height: int, width: int) -> None:
        super().__init__(f"Pixel ({row}, {column}) outside of {height}x{width} image")
        self.row = row
        self.column = column
