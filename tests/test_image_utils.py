import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from pystoneage.utils import decode_run_length, flip_vertical


def decode(src, size):
    dst = bytearray(size)
    written = decode_run_length(bytes(src), dst)
    return bytes(dst), written


def test_literal_copy_short_count():
    out, written = decode([0x03, 7, 8, 9], 3)
    assert out == b"\x07\x08\x09"
    assert written == 3


def test_literal_copy_two_byte_count():
    # head 0x10 + 1 -> count 256 + 2
    src = [0x11, 0x02] + [5] * 258
    out, written = decode(src, 258)
    assert written == 258
    assert out == b"\x05" * 258


def test_repeat_value():
    out, _ = decode([0x84, 0x2A], 4)
    assert out == b"\x2a" * 4


def test_repeat_value_two_byte_count():
    # head 0x90 + 1, value, low byte -> 256 + 1
    out, written = decode([0x91, 0x11, 0x01], 300)
    assert written == 257
    assert out[:257] == b"\x11" * 257
    assert out[257:] == b"\x00" * 43


def test_repeat_value_three_byte_count_clipped():
    # 0xA1 -> 65536 + ..., clipped to destination
    out, written = decode([0xA1, 0x01, 0x00, 0x00], 10)
    assert written == 10
    assert out == b"\x01" * 10


def test_zero_runs():
    out, written = decode([0x02, 0xFF, 0xFF, 0xC2, 0x01, 0x01], 5)
    assert out == b"\xff\xff\x00\x00\x01"
    assert written == 5


def test_zero_run_two_byte_count():
    out, written = decode([0x81, 0x09, 0xD1, 0x00, 0x81, 0x09], 258)
    assert written == 258
    assert out[0] == 9 and out[-1] == 9
    assert out[1:257] == b"\x00" * 256


def test_literal_copy_clipped_to_source():
    out, written = decode([0x05, 1, 2], 5)
    assert written == 2
    assert out == b"\x01\x02\x00\x00\x00"


def test_truncated_header_raises():
    with pytest.raises(ValueError):
        decode([0x85], 4)


def test_flip_vertical_even_rows():
    data = bytearray(b"aabbccdd")
    flip_vertical(data, 2, 4)
    assert data == bytearray(b"ddccbbaa")


def test_flip_vertical_odd_rows_keeps_middle():
    data = bytearray(b"abcdefghi")
    flip_vertical(data, 3, 3)
    assert data == bytearray(b"ghidefabc")
