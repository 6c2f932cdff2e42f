import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from pystoneage.managers import ResourceArchive
from pystoneage.types import AdrnBlock, RealBlock, ADRN_RECORD_SIZE, REAL_HEADER_SIZE


def write_archive(tmp_path, blocks):
    """Writes Adrn.bin/Real.bin for ``[(index, x, y, width, height, RealBlock)]``."""
    real = bytearray()
    adrn = bytearray()
    for index, x, y, width, height, block in blocks:
        raw = block.to_bytes()
        adrn += AdrnBlock(index=index, address=len(real), size=len(raw), x_offset=x, y_offset=y,
                          width=width, height=height).to_bytes()
        real += raw
    adrn_path = tmp_path / "Adrn.bin"
    real_path = tmp_path / "Real.bin"
    adrn_path.write_bytes(bytes(adrn))
    real_path.write_bytes(bytes(real))
    return str(adrn_path), str(real_path)


def test_adrn_record_layout():
    block = AdrnBlock(index=7, address=100, size=30, x_offset=-4, y_offset=-9, width=3, height=2,
                      east=1, south=2, flag=3, map_id=12345)
    raw = block.to_bytes()
    assert len(raw) == ADRN_RECORD_SIZE == 80
    assert AdrnBlock.from_bytes(raw) == block


def test_adrn_record_too_short():
    with pytest.raises(ValueError):
        AdrnBlock.from_bytes(b"\x00" * 79)


def test_real_block_header():
    block = RealBlock(major=1, minor=0, width=2, height=2, size=0, data=b"\x04\x01\x02\x03\x04")
    raw = block.to_bytes()
    assert raw[:2] == b"RD"
    parsed = RealBlock.from_bytes(raw)
    assert parsed.size == REAL_HEADER_SIZE + 5
    assert parsed.data == block.data
    assert parsed.is_compressed


def test_real_block_bad_magic():
    raw = bytearray(RealBlock(0, 0, 1, 1, 0, b"\x00").to_bytes())
    raw[0:2] = b"XX"
    with pytest.raises(ValueError):
        RealBlock.from_bytes(bytes(raw))


def test_real_block_size_beyond_data():
    raw = RealBlock(0, 0, 1, 1, 0, b"\x00\x00").to_bytes()
    with pytest.raises(ValueError):
        RealBlock.from_bytes(raw[:-1])


def test_archive_lookup(tmp_path):
    adrn_path, real_path = write_archive(tmp_path, [
        (1, 0, 0, 1, 1, RealBlock(0, 0, 1, 1, 0, b"\x11")),
        (5, -3, 4, 2, 1, RealBlock(0, 0, 2, 1, 0, b"\x22\x33")),
    ])
    with ResourceArchive(adrn_path, real_path) as archive:
        assert len(archive) == 2
        adrn = archive.get_adrn_block(5)
        assert (adrn.x_offset, adrn.y_offset, adrn.width, adrn.height) == (-3, 4, 2, 1)
        real = archive.get_real_block(adrn.address, adrn.size)
        assert real.data == b"\x22\x33"
        with pytest.raises(KeyError):
            archive.get_adrn_block(2)


def test_archive_short_read(tmp_path):
    adrn_path, real_path = write_archive(tmp_path, [(1, 0, 0, 1, 1, RealBlock(0, 0, 1, 1, 0, b"\x11"))])
    archive = ResourceArchive(adrn_path, real_path)
    try:
        with pytest.raises(ValueError):
            archive.get_real_block(0, 1000)
    finally:
        archive.close()
