from enum import IntEnum


VERSION_1 = 0x0001

MAX_FIELD_LENGTH = 0xff
MAX_CHAIN_TYPE = 0xffff
CHECKSUM_SIZE = 4

# version, chain type, chain reference length, address length
HEADER_SIZE = 6


class ChainType(IntEnum):
    """CAIP-350 chain types.

    Not exhaustive: any integer in 0..MAX_CHAIN_TYPE is a valid chain type,
    registered or not.
    """
    EIP155 = 0x0000
    SOLANA = 0x0002
