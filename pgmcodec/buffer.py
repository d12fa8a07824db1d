from __future__ import annotations

from array import array

from .errors import AllocationError
from .settings import UINT16_MAX
from .types import PGM


def _check_u16(name: str, value: int, minimum: int = 0) -> None:
    if not minimum <= value <= UINT16_MAX:
        raise ValueError(f"{name} must be in [{minimum}, {UINT16_MAX}], got {value}")


def allocate_samples(size: int) -> array:
    """Return a zero-filled 16-bit sample array of the given length."""
    try:
        return array("H", bytes(size * 2))
    except MemoryError as exc:
        raise AllocationError(f"Cannot allocate {size} samples") from exc


def new_buffer(width: int, height: int, max_val: int) -> PGM:
    """Create a zero-filled image of the given dimensions."""
    _check_u16("width", width)
    _check_u16("height", height)
    _check_u16("max_val", max_val, minimum=1)
    return PGM(width, height, max_val, allocate_samples(width * height))


def release_buffer(pgm: PGM) -> None:
    pgm.release()


def get_height(pgm: PGM) -> int:
    return pgm.height


def get_width(pgm: PGM) -> int:
    return pgm.width


def get_max_val(pgm: PGM) -> int:
    return pgm.max_val


def set_max_val(pgm: PGM, max_val: int) -> None:
    """Overwrite the declared maximum without touching the samples."""
    _check_u16("max_val", max_val, minimum=1)
    pgm.max_val = max_val
