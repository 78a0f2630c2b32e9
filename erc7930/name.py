from __future__ import annotations
from string import hexdigits

from erc7930.address import InteroperableAddress
from erc7930.constants import CHECKSUM_SIZE
from erc7930.crypto import keccak_256
from erc7930.errors import DecodeError
from erc7930.utils import bytes_to_hex


def calculate_checksum(address: InteroperableAddress) -> str:
    """First 4 bytes of keccak-256 over the binary encoding minus its
    version field, as 8 uppercase hex characters.
    """
    digest = keccak_256(address.checksum_preimage())
    return bytes_to_hex(digest[:CHECKSUM_SIZE], with_prefix=False)


class InteroperableName(object):
    """Human-readable form `<address>@<chain>#<checksum>`.

    `address` and `chain` are display strings supplied by the caller and
    are not checked against the binary address.
    """

    __slots__ = ('_address', '_chain', '_checksum')

    def __init__(self, address: str, chain: str, checksum: str):
        self._address = address
        self._chain = chain
        self._checksum = checksum

    @property
    def address(self) -> str:
        return self._address

    @property
    def chain(self) -> str:
        return self._chain

    @property
    def checksum(self) -> str:
        return self._checksum

    def __eq__(self, value: InteroperableName) -> bool:
        return (
            isinstance(value, InteroperableName)
            and self.address == value.address
            and self.chain == value.chain
            and self.checksum == value.checksum
        )

    def __ne__(self, value: InteroperableName) -> bool:
        return not self.__eq__(value)

    def __hash__(self) -> int:
        return hash((self.address, self.chain, self.checksum))

    def __repr__(self) -> str:
        return f'InteroperableName({str(self)!r})'

    def __str__(self) -> str:
        return f'{self.address}@{self.chain}#{self.checksum}'

    @classmethod
    def parse(cls, text: str) -> InteroperableName:
        rest, sep, checksum = text.rpartition('#')
        if not sep:
            raise DecodeError('Missing checksum separator "#".')
        address, sep, chain = rest.partition('@')
        if not sep:
            raise DecodeError('Missing chain separator "@".')
        if (
            len(checksum) != CHECKSUM_SIZE * 2
            or not all(c in hexdigits for c in checksum)
        ):
            raise DecodeError(f'Invalid checksum: {checksum!r}.')
        return cls(address, chain, checksum.upper())


def to_interoperable_name(
    address: InteroperableAddress, chain_string: str, address_string: str
) -> InteroperableName:
    return InteroperableName(
        address_string, chain_string, calculate_checksum(address)
    )


def format_interoperable_name(name: InteroperableName) -> str:
    return str(name)


def parse_interoperable_name(text: str) -> InteroperableName:
    return InteroperableName.parse(text)


def verify_checksum(
    address: InteroperableAddress, name: InteroperableName
) -> bool:
    return calculate_checksum(address) == name.checksum.upper()
