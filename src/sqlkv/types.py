"""
Value conversion between Python and the value column.

The value column is binary-safe: drivers hand back `str` for text payloads
and `bytes`, `bytearray` or `memoryview` for binary ones.
"""
import struct
from typing import Any

from sqlkv.exceptions import DecodeError, ValidationError

UINT64_SIZE = 8
UINT64_MAX = 2 ** 64 - 1

_UINT64 = struct.Struct('<Q')


def encode_uint64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as 8 little-endian bytes.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f'Expected int, got {type(value).__name__}')
    if not 0 <= value <= UINT64_MAX:
        raise ValidationError(f'Value {value} out of unsigned 64-bit range')
    return _UINT64.pack(value)


def decode_uint64(data: bytes) -> int:
    """Decode 8 little-endian bytes into an unsigned 64-bit integer.

    Raises DecodeError if the payload is not exactly 8 bytes long.
    """
    if len(data) != UINT64_SIZE:
        raise DecodeError(f'Expected {UINT64_SIZE} bytes, got {len(data)}')
    return _UINT64.unpack(data)[0]


def to_bytes(value: Any) -> bytes:
    """Normalize a stored or supplied value to bytes.
    """
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f'Unsupported value type: {type(value).__name__}')


def to_text(value: Any) -> str:
    """Normalize a stored value to text, decoding binary payloads as UTF-8.
    """
    if isinstance(value, str):
        return value
    try:
        return to_bytes(value).decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecodeError(f'Value is not valid UTF-8 text: {e}') from e


def byte_length(value: str | bytes) -> int:
    """Length of a key or value as stored, in bytes.
    """
    return len(to_bytes(value))
