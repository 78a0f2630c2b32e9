from erc7930.__main__ import main

import pytest


VITALIK = '0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045'


def test_encode(capsys):
    assert main([
        'encode', '--chain-type', '0', '--chain-reference', '1',
        '--address', VITALIK, '--chain', 'eip155:1'
    ]) == 0
    out = capsys.readouterr().out
    assert '0x00010000010114D8DA6BF26964AF9D7EED9E03E53415D37AA96045' in out
    assert '4CA88C9C' in out
    assert f'{VITALIK}@eip155:1#4CA88C9C' in out


def test_encode_chain_only(capsys):
    genesis = (
        '0x45296998A6F8E2A784DB5D9F95E18FC23F70441A1039446801089879B08C7EF0'
    )
    assert main([
        'encode', '--chain-type', '0x0002', '--chain-reference', genesis,
        '--chain', 'solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdpKuc147dw2N9d'
    ]) == 0
    out = capsys.readouterr().out
    assert (
        'Name     : @solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdpKuc147dw2N9d'
        '#2EB18670'
    ) in out


def test_encode_without_chain(capsys):
    assert main(['encode', '--chain-type', '0', '--address', VITALIK]) == 0
    out = capsys.readouterr().out
    assert 'B26DB7CB' in out
    assert 'Name' not in out


def test_encode_errors(capsys):
    assert main(['encode', '--chain-type', '0']) == 2
    err = capsys.readouterr().err
    assert 'at least one of chainReference or address must be provided' in err
    assert main(['encode', '--chain-type', '0', '--address', '0x123']) == 2
    assert main(['encode', '--chain-type', '70000', '--address', VITALIK]) == 2
    assert main(['encode', '--chain-type', '0', '--chain-reference', 'one']) == 2


def test_decode(capsys):
    assert main([
        'decode', '0x00010000010114D8DA6BF26964AF9D7EED9E03E53415D37AA96045'
    ]) == 0
    out = capsys.readouterr().out
    assert 'ChainType        : 0x0000  (eip155)' in out
    assert 'ChainReference   : 0x01' in out
    assert 'Address          : 0xD8DA6BF26964AF9D7EED9E03E53415D37AA96045' in out
    assert 'Checksum : 4CA88C9C' in out


def test_decode_unregistered(capsys):
    assert main(['-v', 'decode', '00011234010100']) == 0
    assert '(unregistered)' in capsys.readouterr().out


def test_decode_errors(capsys):
    assert main(['decode', '000100']) == 2
    assert 'too short' in capsys.readouterr().err
    assert main(['decode', 'zz']) == 2


def test_usage():
    with pytest.raises(SystemExit):
        main([])
