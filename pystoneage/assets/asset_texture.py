import dataclasses
import logging
import struct

from .asset_base import Asset
from pystoneage.types import ByteOrder
from pystoneage.utils import bytes_to_int16, bytes_to_uint16, int16_to_bytes, uint16_to_bytes

logger = logging.getLogger(__name__)

# x:int16, y:int16, width:uint16, height:uint16
TEXTURE_HEADER_SIZE = 8

@dataclasses.dataclass(repr=False)
class Texture(Asset):
    """
    A positioned 8-bit bitmap.

    The wire layout is a fixed header followed by the pixel data:

    ======  ======  ========
    offset  type    field
    ======  ======  ========
    0       int16   x
    2       int16   y
    4       uint16  width
    6       uint16  height
    8       u8[]    bitmap (``width * height`` bytes)
    ======  ======  ========
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    bitmap: bytes = b""
    byte_order: ByteOrder = ByteOrder.BIG

    def from_bytes(self, data: bytes) -> bool:
        """
        Populates the texture from its binary record using ``self.byte_order``.
        Returns False if the record is malformed; only
        ``loaded_successfully`` changes in that case.
        """
        try:
            decoded = decode_texture(data, self.byte_order)
        except ValueError as e:
            logger.warning(f"Texture {self.asset_id}: {e}")
            self.loaded_successfully = False
            return False
        super().from_bytes(data)
        self.x, self.y = decoded.x, decoded.y
        self.width, self.height = decoded.width, decoded.height
        self.bitmap = decoded.bitmap
        return self.loaded_successfully

    def to_bytes(self, byte_order: ByteOrder | None = None) -> bytes:
        order = byte_order or self.byte_order
        if len(self.bitmap) != self.width * self.height:
            raise ValueError(f"Texture {self.asset_id}: bitmap has {len(self.bitmap)} bytes, "
                             f"expected {self.width}x{self.height}")
        try:
            header = (int16_to_bytes(self.x, order) + int16_to_bytes(self.y, order)
                      + uint16_to_bytes(self.width, order) + uint16_to_bytes(self.height, order))
        except struct.error as e:
            raise ValueError(f"Texture {self.asset_id}: header field out of range: {e}") from e
        return header + bytes(self.bitmap)

    def __str__(self):
        return f"Texture(ID={self.asset_id}, Pos=({self.x},{self.y}), Size={self.width}x{self.height})"

def decode_texture(data: bytes, byte_order: ByteOrder = ByteOrder.BIG, asset_id: int | str = 0) -> Texture:
    """
    Decodes a texture record.

    Raises:
        ValueError: If ``data`` is shorter than the header or the bitmap it declares.
    """
    if len(data) < TEXTURE_HEADER_SIZE:
        raise ValueError(f"texture record needs {TEXTURE_HEADER_SIZE} header bytes, got {len(data)}")
    pos = 0
    x = bytes_to_int16(data, pos, byte_order)
    pos += 2
    y = bytes_to_int16(data, pos, byte_order)
    pos += 2
    width = bytes_to_uint16(data, pos, byte_order)
    pos += 2
    height = bytes_to_uint16(data, pos, byte_order)
    pos += 2
    end = pos + width * height
    if end > len(data):
        raise ValueError(f"bitmap of {width}x{height} needs {end} bytes, got {len(data)}")
    if end < len(data):
        logger.debug(f"Texture {asset_id}: ignoring {len(data) - end} trailing bytes")
    return Texture(asset_id=asset_id, raw_data=bytes(data), loaded_successfully=True,
                   x=x, y=y, width=width, height=height,
                   bitmap=bytes(data[pos:end]), byte_order=byte_order)
