"""
Records of the StoneAge graphic archives.

``Adrn.bin`` is a flat index of fixed 80-byte entries, one per graphic.
``Real.bin`` holds the image blocks the index points at, each starting with
an ``RD`` header. All fields are little endian.
"""
import dataclasses
import struct

ADRN_RECORD = struct.Struct('<IIIiiIIBBB45sI')
ADRN_RECORD_SIZE = ADRN_RECORD.size  # 80

REAL_HEADER = struct.Struct('<2sBBIII')
REAL_HEADER_SIZE = REAL_HEADER.size  # 16
REAL_MAGIC = b'RD'

@dataclasses.dataclass
class AdrnBlock:
    """One graphic entry of the address index."""
    index: int
    address: int
    size: int
    x_offset: int
    y_offset: int
    width: int
    height: int
    east: int = 0
    south: int = 0
    flag: int = 0
    map_id: int = 0

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> 'AdrnBlock':
        if len(data) - offset < ADRN_RECORD_SIZE:
            raise ValueError(f"ADRN record needs {ADRN_RECORD_SIZE} bytes, got {len(data) - offset}")
        (index, address, size, x_offset, y_offset, width, height,
         east, south, flag, _reserved, map_id) = ADRN_RECORD.unpack_from(data, offset)
        return cls(index=index, address=address, size=size, x_offset=x_offset, y_offset=y_offset,
                   width=width, height=height, east=east, south=south, flag=flag, map_id=map_id)

    def to_bytes(self) -> bytes:
        return ADRN_RECORD.pack(self.index, self.address, self.size, self.x_offset, self.y_offset,
                                self.width, self.height, self.east, self.south, self.flag,
                                b'\x00' * 45, self.map_id)

@dataclasses.dataclass
class RealBlock:
    """An image block; ``major == 1`` means the data is run-length encoded."""
    major: int
    minor: int
    width: int
    height: int
    size: int
    data: bytes = b""

    @property
    def is_compressed(self) -> bool:
        return self.major == 1

    @classmethod
    def from_bytes(cls, data: bytes) -> 'RealBlock':
        if len(data) < REAL_HEADER_SIZE:
            raise ValueError(f"REAL block needs at least {REAL_HEADER_SIZE} bytes, got {len(data)}")
        magic, major, minor, width, height, size = REAL_HEADER.unpack_from(data, 0)
        if magic != REAL_MAGIC:
            raise ValueError(f"Bad REAL block magic {magic!r}")
        if size < REAL_HEADER_SIZE or size > len(data):
            raise ValueError(f"REAL block declares {size} bytes but {len(data)} are available")
        return cls(major=major, minor=minor, width=width, height=height, size=size,
                   data=bytes(data[REAL_HEADER_SIZE:size]))

    def to_bytes(self) -> bytes:
        size = REAL_HEADER_SIZE + len(self.data)
        return REAL_HEADER.pack(REAL_MAGIC, self.major, self.minor, self.width, self.height, size) + self.data
