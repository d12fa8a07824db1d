from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from enum import Enum

from .settings import UINT8_MAX


class PGMType(Enum):
    P2 = "P2"
    P5 = "P5"

    @classmethod
    def parse(cls, value: "PGMType | str") -> "PGMType":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown PGM variant: {value!r}") from None

    @property
    def magic(self) -> bytes:
        return self.value.encode("ascii")


@dataclass(eq=False)
class PGM:
    """Row-major 16-bit grayscale buffer with its PGM metadata."""

    width: int
    height: int
    max_val: int
    data: array = field(default_factory=lambda: array("H"), repr=False)
    released: bool = field(default=False, repr=False)

    @property
    def size(self) -> int:
        """Return the sample count, computed without 16-bit overflow."""
        return self.width * self.height

    @property
    def is_wide(self) -> bool:
        """Return True when binary samples take two bytes."""
        return self.max_val > UINT8_MAX

    def release(self) -> None:
        """Drop the sample storage. Releasing twice is a no-op."""
        if self.released:
            return
        self.data = array("H")
        self.released = True

    def __enter__(self) -> "PGM":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.release()
