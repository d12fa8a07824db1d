from __future__ import annotations

from array import array
from typing import Iterable

from pgmcodec import PGM, new_buffer


def make_pgm(width: int, height: int, max_val: int, samples: Iterable[int]) -> PGM:
    pgm = new_buffer(width, height, max_val)
    pgm.data[:] = array("H", samples)
    return pgm
