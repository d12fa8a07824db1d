from __future__ import annotations

import pytest

from pgmcodec import PGM

from .helpers import make_pgm


@pytest.fixture
def example_pgm() -> PGM:
    return make_pgm(2, 2, 255, [0, 128, 255, 64])
