"""
Hex helpers for the Rockside wire format.

Binary values travel as ``0x``-prefixed lowercase hex strings and big
numeric values as ``0x``-prefixed hex quantities.
"""
import re
from typing import Union

from .exceptions import HexDecodeError

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_BODY = re.compile(r"[0-9a-fA-F]*")


def buf_to_hex(data: BytesLike) -> str:
    """
    Encode a byte buffer as a 0x-prefixed hex string.

    Args:
        data: Bytes to encode

    Returns:
        Lowercase hex string, two digits per byte (``b""`` gives ``"0x"``)
    """
    return "0x" + bytes(data).hex()


def hex_to_buf(value: str) -> bytes:
    """
    Decode a 0x-prefixed hex string back to bytes.

    Args:
        value: Hex string as produced by :func:`buf_to_hex`

    Returns:
        Decoded bytes

    Raises:
        HexDecodeError: If the prefix is missing, the length is odd or a
            non-hex character is present
    """
    if not isinstance(value, str):
        raise HexDecodeError(f"Expected a hex string, got {type(value).__name__}")
    if value[:2] not in ("0x", "0X"):
        raise HexDecodeError(f"Hex string must start with 0x: {value!r}")

    body = value[2:]
    if len(body) % 2:
        raise HexDecodeError(f"Hex string has an odd number of digits: {value!r}")
    if not _HEX_BODY.fullmatch(body):
        raise HexDecodeError(f"Hex string contains non-hex characters: {value!r}")

    return bytes.fromhex(body)


def to_hex_quantity(value: Union[int, str]) -> str:
    """
    Encode a non-negative amount as a 0x-prefixed hex quantity.

    Accepts ints, decimal strings and 0x strings, so amounts wider than a
    float can be passed without losing precision.
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not a valid amount")
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text, 16) if text[:2] in ("0x", "0X") else int(text, 10)
        except ValueError:
            raise ValueError(f"Invalid numeric amount: {value!r}")
    if not isinstance(value, int):
        raise ValueError(f"Amount must be an int or a numeric string, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Amount must be non-negative, got {value}")
    return f"0x{value:x}"
