from erc7930.constants import VERSION_1, ChainType
from erc7930.errors import DecodeError, ValidationError
from erc7930.address import (
    CreateParams,
    InteroperableAddress,
    create_interoperable_address,
    encode_interoperable_address,
    decode_interoperable_address,
    create_and_encode,
)
from erc7930.name import (
    InteroperableName,
    calculate_checksum,
    to_interoperable_name,
    format_interoperable_name,
    parse_interoperable_name,
    verify_checksum,
)
from erc7930.utils import (
    concat_bytes,
    number_to_bytes,
    number_to_min_bytes,
    hex_to_bytes,
    bytes_to_hex,
    keccak256,
)
