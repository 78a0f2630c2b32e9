import argparse
import logging
import sys

from erc7930.address import (
    CreateParams, create_interoperable_address, decode_interoperable_address
)
from erc7930.constants import ChainType
from erc7930.errors import DecodeError, ValidationError
from erc7930.name import calculate_checksum, to_interoperable_name
from erc7930.utils import bytes_to_hex, hex_to_bytes


def _chain_type_label(chain_type: int) -> str:
    try:
        return ChainType(chain_type).name.lower()
    except ValueError:
        return 'unregistered'


def _chain_reference_arg(value: str) -> int | bytes:
    # decimal is a chain id, 0x-prefixed is raw bytes
    if value[:2] in ('0x', '0X'):
        return hex_to_bytes(value)
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f'Invalid chain reference: {value!r}.')


def breakdown(address) -> str:
    ref, addr = address.chain_reference, address.address
    return '\n'.join([
        f'  Version          : 0x{address.version:04x}',
        f'  ChainType        : 0x{address.chain_type:04x}  '
        f'({_chain_type_label(address.chain_type)})',
        f'  ChainRefLength   : 0x{len(ref):02x}  ({len(ref)} bytes)',
        f'  ChainReference   : {bytes_to_hex(ref)}',
        f'  AddressLength    : 0x{len(addr):02x}  ({len(addr)} bytes)',
        f'  Address          : {bytes_to_hex(addr)}',
    ])


def encode(args: argparse.Namespace):
    address = create_interoperable_address(CreateParams(
        args.chain_type,
        None if args.chain_reference is None
        else _chain_reference_arg(args.chain_reference),
        args.address
    ))
    print(f'Binary   : {bytes_to_hex(address.encode())}')
    print(f'Checksum : {calculate_checksum(address)}')
    if args.chain is not None:
        label = args.label if args.label is not None else (args.address or '')
        print(f'Name     : {to_interoperable_name(address, args.chain, label)}')


def decode(args: argparse.Namespace):
    address = decode_interoperable_address(hex_to_bytes(args.binary.strip()))
    print(breakdown(address))
    print(f'Checksum : {calculate_checksum(address)}')


def parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='erc7930',
        description='Encode and decode ERC-7930 interoperable addresses.'
    )
    p.add_argument('-v', '--verbose', action='store_true',
        help='Enable debug logging')
    sub = p.add_subparsers(dest='command', required=True)
    e = sub.add_parser('encode', help='Encode an interoperable address')
    e.add_argument('--chain-type', type=lambda x: int(x, 0), required=True,
        help='CAIP-350 chain type, e.g. 0 (eip155) or 2 (solana)')
    e.add_argument('--chain-reference',
        help='Chain id (decimal) or raw chain reference (0x-prefixed hex)')
    e.add_argument('--address', help='Address as hex, 0x prefix optional')
    e.add_argument('--chain', help='Chain label for the name, e.g. eip155:1')
    e.add_argument('--label',
        help='Address label for the name (default: --address)')
    e.set_defaults(func=encode)
    d = sub.add_parser('decode', help='Decode a binary interoperable address')
    d.add_argument('binary', help='Binary address as hex, 0x prefix optional')
    d.set_defaults(func=decode)
    return p


def main(argv: list[str] | None = None) -> int:
    args = parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    try:
        args.func(args)
    except (ValidationError, DecodeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
