import struct

from pystoneage.types import ByteOrder

# --- Byte/Numeric Conversion Functions (Little Endian default) ---

def bytes_to_int16(data: bytes, offset: int = 0, byte_order: ByteOrder = ByteOrder.LITTLE) -> int:
    """Converts 2 bytes to a signed 16-bit integer."""
    return struct.unpack_from(byte_order.value + 'h', data, offset)[0]

def bytes_to_uint16(data: bytes, offset: int = 0, byte_order: ByteOrder = ByteOrder.LITTLE) -> int:
    """Converts 2 bytes to an unsigned 16-bit integer."""
    return struct.unpack_from(byte_order.value + 'H', data, offset)[0]

def int16_to_bytes(value: int, byte_order: ByteOrder = ByteOrder.LITTLE) -> bytes:
    """Converts a signed 16-bit integer to 2 bytes."""
    return struct.pack(byte_order.value + 'h', value)

def uint16_to_bytes(value: int, byte_order: ByteOrder = ByteOrder.LITTLE) -> bytes:
    """Converts an unsigned 16-bit integer to 2 bytes."""
    return struct.pack(byte_order.value + 'H', value)

