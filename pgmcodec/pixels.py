from __future__ import annotations

from .errors import BoundsError
from .settings import UINT16_MAX
from .types import PGM


def renormalize(value: int, old_max: int, new_max: int) -> int:
    """Map value from [0, old_max] to [0, new_max], truncating.

    The result is stored as 16 bits, so samples above old_max wrap.
    """
    return ((value * new_max) // old_max) & UINT16_MAX


def _index(pgm: PGM, row: int, column: int) -> int:
    # Rows and columns are zero based; negative values do not wrap.
    if not (0 <= row < pgm.height and 0 <= column < pgm.width):
        raise BoundsError(row, column, pgm.height, pgm.width)
    return row * pgm.width + column


def _check_sample(value: int) -> None:
    if not 0 <= value <= UINT16_MAX:
        raise ValueError(f"Sample must be in [0, {UINT16_MAX}], got {value}")


def get_pixel(pgm: PGM, row: int, column: int) -> int:
    return pgm.data[_index(pgm, row, column)]


def set_pixel(pgm: PGM, row: int, column: int, value: int) -> None:
    """Store a raw sample, raising max_val when the sample exceeds it."""
    index = _index(pgm, row, column)
    _check_sample(value)
    pgm.data[index] = value
    if value > pgm.max_val:
        pgm.max_val = value


def get_pixel_normalized(pgm: PGM, row: int, column: int) -> int:
    """Return the sample scaled to the full [0, 65535] range."""
    return renormalize(pgm.data[_index(pgm, row, column)], pgm.max_val, UINT16_MAX)


def set_pixel_normalized(pgm: PGM, row: int, column: int, value: int) -> None:
    """Store a [0, 65535] value scaled down to [0, max_val]."""
    index = _index(pgm, row, column)
    _check_sample(value)
    pgm.data[index] = renormalize(value, UINT16_MAX, pgm.max_val)
