from __future__ import annotations

import sys
from dataclasses import dataclass

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF
WHITESPACE = b" \t\n\r"

BYTE_ORDERS = ("native", "big", "little")
DEFAULT_BYTE_ORDER = "native"


@dataclass(frozen=True)
class CodecSettings:
    # "native" is host order; "big" is the Netpbm standard order.
    byte_order: str = DEFAULT_BYTE_ORDER

    def __post_init__(self) -> None:
        if self.byte_order not in BYTE_ORDERS:
            raise ValueError("byte_order must be one of: " + ", ".join(BYTE_ORDERS))

    @property
    def needs_swap(self) -> bool:
        """True when 16-bit words must be byte-swapped against host order."""
        if self.byte_order == "native":
            return False
        return self.byte_order != sys.byteorder
