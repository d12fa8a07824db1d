from .buffer import get_height, get_max_val, get_width, new_buffer, release_buffer, set_max_val
from .decoder import PGMReader, decode, loads, read_pgm
from .encoder import PGMWriter, dumps, encode, write_pgm
from .errors import AllocationError, BoundsError, FormatError, PGMError, PGMIOError
from .imaging import from_image, to_image
from .pixels import get_pixel, get_pixel_normalized, renormalize, set_pixel, set_pixel_normalized
from .rescale import rescale
from .settings import CodecSettings
from .types import PGM, PGMType

__all__ = [
    "AllocationError",
    "BoundsError",
    "CodecSettings",
    "decode",
    "dumps",
    "encode",
    "FormatError",
    "from_image",
    "get_height",
    "get_max_val",
    "get_pixel",
    "get_pixel_normalized",
    "get_width",
    "loads",
    "new_buffer",
    "PGM",
    "PGMError",
    "PGMIOError",
    "PGMReader",
    "PGMType",
    "PGMWriter",
    "read_pgm",
    "release_buffer",
    "renormalize",
    "rescale",
    "set_max_val",
    "set_pixel",
    "set_pixel_normalized",
    "to_image",
    "write_pgm",
]
