from __future__ import annotations
from struct import pack, unpack_from

from erc7930.constants import (
    VERSION_1, MAX_FIELD_LENGTH, MAX_CHAIN_TYPE, HEADER_SIZE
)
from erc7930.errors import DecodeError, ValidationError
from erc7930.utils import bytes_to_hex, hex_to_bytes, number_to_min_bytes

import logging


log = logging.getLogger(__name__)


def _normalize_chain_reference(
    value: int | bytes | bytearray | memoryview | None
) -> bytes:
    match value:
        case None:
            return b''
        case bool():
            raise ValidationError('Invalid chain reference type.')
        case int():
            if value < 0:
                raise ValidationError(
                    'chain reference must be a non-negative integer'
                )
            return number_to_min_bytes(value)
        case bytes() | bytearray() | memoryview():
            return bytes(value)
        case _:
            raise ValidationError('Invalid chain reference type.')


def _normalize_address(
    value: str | bytes | bytearray | memoryview | None
) -> bytes:
    match value:
        case None:
            return b''
        case str():
            return hex_to_bytes(value)
        case bytes() | bytearray() | memoryview():
            return bytes(value)
        case _:
            raise ValidationError('Invalid address type.')


def _validate(chain_type: int, chain_reference: bytes, address: bytes):
    if not chain_reference and not address:
        raise ValidationError(
            'at least one of chainReference or address must be provided'
        )
    if len(chain_reference) > MAX_FIELD_LENGTH:
        raise ValidationError('chain reference length exceeds 255 bytes')
    if len(address) > MAX_FIELD_LENGTH:
        raise ValidationError('address length exceeds 255 bytes')
    if (
        not isinstance(chain_type, int)
        or isinstance(chain_type, bool)
        or chain_type < 0 or chain_type > MAX_CHAIN_TYPE
    ):
        raise ValidationError('chain type must fit in 2 bytes')


class CreateParams(object):

    def __init__(self,
        chain_type: int,
        chain_reference: int | bytes | bytearray | memoryview | None = None,
        address: str | bytes | bytearray | memoryview | None = None
    ):
        self.chain_type = chain_type
        self.chain_reference = chain_reference
        self.address = address


class InteroperableAddress(object):
    """Binary form of an ERC-7930 interoperable address.

    Layout, big-endian:

        version (2) | chain type (2) | chain reference length (1)
        | chain reference (n) | address length (1) | address (m)

    Instances are immutable and compare by value.
    """

    __slots__ = ('_chain_type', '_chain_reference', '_address')

    def __init__(self,
        chain_type: int,
        chain_reference: bytes = b'',
        address: bytes = b''
    ):
        _validate(chain_type, chain_reference, address)
        self._chain_type = int(chain_type)
        self._chain_reference = bytes(chain_reference)
        self._address = bytes(address)

    @property
    def version(self) -> int:
        return VERSION_1

    @property
    def chain_type(self) -> int:
        return self._chain_type

    @property
    def chain_reference(self) -> bytes:
        return self._chain_reference

    @property
    def address(self) -> bytes:
        return self._address

    def __eq__(self, value: InteroperableAddress) -> bool:
        return (
            isinstance(value, InteroperableAddress)
            and self.chain_type == value.chain_type
            and self.chain_reference == value.chain_reference
            and self.address == value.address
        )

    def __ne__(self, value: InteroperableAddress) -> bool:
        return not self.__eq__(value)

    def __hash__(self) -> int:
        return hash(self.encode())

    def __repr__(self) -> str:
        return (
            f'InteroperableAddress(chain_type=0x{self.chain_type:04x}, '
            f'chain_reference={bytes_to_hex(self.chain_reference)}, '
            f'address={bytes_to_hex(self.address)})'
        )

    @property
    def size(self) -> int:
        return HEADER_SIZE + len(self.chain_reference) + len(self.address)

    def checksum_preimage(self) -> bytes:
        """Encoding without the version prefix."""
        return b''.join([
            pack('>HB', self.chain_type, len(self.chain_reference)),
            self.chain_reference,
            pack('>B', len(self.address)),
            self.address
        ])

    def encode(self) -> bytes:
        return pack('>H', self.version) + self.checksum_preimage()

    @classmethod
    def decode(
        cls, view: bytes | bytearray | memoryview
    ) -> InteroperableAddress:
        """Parse a complete binary address. Trailing bytes are rejected."""
        view = memoryview(view)
        if len(view) < HEADER_SIZE:
            raise DecodeError(
                f'Input too short: need at least {HEADER_SIZE} bytes, '
                f'got {len(view)}.'
            )
        version, chain_type, ref_len = unpack_from('>HHB', view, 0)
        if version != VERSION_1:
            raise DecodeError(f'Unsupported version: 0x{version:04x}.')
        offset = 5
        chain_reference = bytes(view[offset:offset + ref_len])
        offset += ref_len
        if offset >= len(view):
            raise DecodeError('Truncated chain reference.')
        addr_len = view[offset]
        offset += 1
        address = bytes(view[offset:offset + addr_len])
        if len(address) != addr_len:
            raise DecodeError('Truncated address.')
        offset += addr_len
        if offset != len(view):
            raise DecodeError(
                f'{len(view) - offset} trailing bytes after address.'
            )
        return cls(chain_type, chain_reference, address)


def create_interoperable_address(params: CreateParams) -> InteroperableAddress:
    chain_reference = _normalize_chain_reference(params.chain_reference)
    address = _normalize_address(params.address)
    result = InteroperableAddress(params.chain_type, chain_reference, address)
    log.debug('Created %r', result)
    return result


def encode_interoperable_address(address: InteroperableAddress) -> bytes:
    return address.encode()


def decode_interoperable_address(
    data: bytes | bytearray | memoryview
) -> InteroperableAddress:
    result = InteroperableAddress.decode(data)
    log.debug('Decoded %r', result)
    return result


def create_and_encode(params: CreateParams) -> bytes:
    return encode_interoperable_address(create_interoperable_address(params))
