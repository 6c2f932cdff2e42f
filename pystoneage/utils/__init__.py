# This file marks pystoneage.utils as a Python package.

from .helpers import (
    bytes_to_int16,
    bytes_to_uint16,
    int16_to_bytes,
    uint16_to_bytes,
)
from .image_utils import decode_run_length, flip_vertical

__all__ = [
    # Byte/Numeric Conversion
    "bytes_to_int16", "bytes_to_uint16",
    "int16_to_bytes", "uint16_to_bytes",
    # Bitmaps
    "decode_run_length", "flip_vertical",
]
