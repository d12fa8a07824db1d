from __future__ import annotations

from array import array

from .pixels import renormalize
from .types import PGM


def rescale(pgm: PGM, max_val: int) -> None:
    """Remap every sample to the new maximum and store it on the image.

    Integer division truncates at every step, so scaling down and back up
    does not restore the original samples.
    """
    old_max = pgm.max_val
    pgm.data[:] = array("H", (renormalize(value, old_max, max_val) for value in pgm.data))
    pgm.max_val = max_val
