from __future__ import annotations
from binascii import unhexlify, hexlify

from erc7930.crypto import keccak_256 as keccak256
from erc7930.errors import DecodeError, ValidationError


def hex_to_bytes(hex: str) -> bytes:
    """Decode a hex string, with or without a `0x`/`0X` prefix.

    Digits may be any case. Raises DecodeError on odd length or any
    character outside 0-9a-fA-F.
    """
    if hex[:2] in ('0x', '0X'):
        hex = hex[2:]
    try:
        return unhexlify(hex)
    except ValueError as e:
        # binascii.Error, or non-ASCII str
        raise DecodeError(f'Invalid hex string: {e}') from e


def bytes_to_hex(
    data: bytes | bytearray | memoryview, with_prefix: bool = True
) -> str:
    x = hexlify(data).decode().upper()
    return '0x' + x if with_prefix else x


def number_to_bytes(num: int, length: int) -> bytes:
    """Big-endian, exactly `length` bytes. High-order bits beyond
    `length` bytes are discarded.
    """
    return (num & ((1 << (length << 3)) - 1)).to_bytes(length, 'big')


def number_to_min_bytes(num: int) -> bytes:
    """Big-endian with no leading zero byte. Zero encodes as b''."""
    if num < 0:
        raise ValidationError('number must be a non-negative integer')
    return num.to_bytes((num.bit_length() + 7) >> 3, 'big')


def concat_bytes(*sequences: bytes | bytearray | memoryview) -> bytes:
    return b''.join(sequences)


__all__ = [
    'hex_to_bytes', 'bytes_to_hex', 'number_to_bytes',
    'number_to_min_bytes', 'concat_bytes', 'keccak256',
]
