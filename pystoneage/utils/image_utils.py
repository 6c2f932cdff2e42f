"""Bitmap helpers for StoneAge graphic blocks."""

def decode_run_length(src: bytes, dst: bytearray) -> int:
    """
    Decodes a run-length encoded block into ``dst``.

    Each run starts with a head byte whose range selects the run kind and how
    many count bytes follow it:

    - ``0x00-0x7F``: copy literal bytes from the source.
    - ``0x80-0xBF``: repeat the next source byte.
    - ``0xC0-0xFF``: repeat a zero byte.

    Within each kind the head byte carries the low, middle or high part of the
    count depending on its sub-range; the remaining parts are read from the
    following bytes. Writes are clipped to ``len(dst)`` and literal copies to
    what remains of ``src``.

    Returns:
        The number of bytes written to ``dst``.

    Raises:
        ValueError: If a run header is cut off by the end of ``src``.
    """
    length = len(src)
    read_pos = 0
    write_pos = 0
    try:
        while read_pos < length:
            head = src[read_pos]
            read_pos += 1
            value = 0
            if head >= 224:
                copy = False
                x, y, z = head - 224, src[read_pos], src[read_pos + 1]
                read_pos += 2
            elif head >= 208:
                copy = False
                x, y, z = 0, head - 208, src[read_pos]
                read_pos += 1
            elif head >= 192:
                copy = False
                x, y, z = 0, 0, head - 192
            elif head >= 160:
                copy = False
                value = src[read_pos]
                x, y, z = head - 160, src[read_pos + 1], src[read_pos + 2]
                read_pos += 3
            elif head >= 144:
                copy = False
                value = src[read_pos]
                x, y, z = 0, head - 144, src[read_pos + 1]
                read_pos += 2
            elif head >= 128:
                copy = False
                value = src[read_pos]
                x, y, z = 0, 0, head - 128
                read_pos += 1
            elif head >= 32:
                copy = True
                x, y, z = head - 32, src[read_pos], src[read_pos + 1]
                read_pos += 2
            elif head >= 16:
                copy = True
                x, y, z = 0, head - 16, src[read_pos]
                read_pos += 1
            else:
                copy = True
                x, y, z = 0, 0, head

            total = min(x * 65536 + y * 256 + z, len(dst) - write_pos)
            if copy:
                total = min(total, length - read_pos)
                dst[write_pos:write_pos + total] = src[read_pos:read_pos + total]
                read_pos += total
            else:
                dst[write_pos:write_pos + total] = bytes([value]) * total
            write_pos += total
    except IndexError as e:
        raise ValueError(f"Run-length data truncated at offset {read_pos}") from e
    return write_pos

def flip_vertical(data: bytearray, width: int, height: int) -> None:
    """Reverses the row order of a ``width * height`` bitmap in place."""
    for i in range(height // 2):
        top = i * width
        bottom = (height - i - 1) * width
        row = data[top:top + width]
        data[top:top + width] = data[bottom:bottom + width]
        data[bottom:bottom + width] = row
