"""
Tests for genesis block construction and verification
"""
from dataclasses import replace

import pytest

from footycash.chainparams import (GenesisSpec, build_genesis_block, check_genesis, genesis_scriptsig,
                                   build_main_params, build_testnet_params, uint256, MAIN_GENESIS,
                                   MAIN_GENESIS_HASH, MAIN_GENESIS_MERKLE_ROOT, TEST_GENESIS, TEST_GENESIS_HASH)
from footycash.core import GenesisMismatchError
from tests.utility import MAIN_HEADER_HEX, TEST_HEADER_HEX, pinned_hasher

TIMESTAMP_HEX = "2016 FootyCash launches and is a huge success".encode("ascii").hex()

GENESIS_TX_HEX = (
        "01000000"  # version
        "510cca56"  # time 1456082001
        "01" + "00" * 32 + "ffffffff"  # null prevout
        + "31" + "00012a2d" + TIMESTAMP_HEX  # scriptsig
        + "ffffffff"  # sequence
        + "01" + "00" * 8 + "00"  # empty output
        + "00000000"  # locktime
)

MAIN_MERKLE_DISPLAY = "4e448dece2984c7c9312b4d878e8493664375d4b8b9fbdf232094aae71328406"
MAIN_HASH_DISPLAY = "0000005ec05d79bef930111ff31cc66e8127752a084936e0ff938fea15993241"
TEST_HASH_DISPLAY = "0000d864d0d5e1e6c08d8a9b6cdf66a62bc1c9a68d5c82e6088f368eaf770905"


def main_hasher():
    return pinned_hasher({
        bytes.fromhex(MAIN_HEADER_HEX): MAIN_GENESIS_HASH,
        bytes.fromhex(TEST_HEADER_HEX): TEST_GENESIS_HASH,
    })


def test_genesis_scriptsig():
    assert genesis_scriptsig(MAIN_GENESIS) == bytes.fromhex("00012a2d" + TIMESTAMP_HEX)


def test_genesis_coinbase_serialization():
    block = build_genesis_block(MAIN_GENESIS)
    assert len(block.txs) == 1
    coinbase = block.txs[0]
    assert coinbase.is_coinbase
    assert coinbase.outputs[0].is_empty
    assert coinbase.to_bytes().hex() == GENESIS_TX_HEX


def test_main_genesis_merkle_root():
    block = build_genesis_block(MAIN_GENESIS)
    assert block.merkle_root[::-1].hex() == MAIN_MERKLE_DISPLAY
    assert block.merkle_root == MAIN_GENESIS_MERKLE_ROOT


def test_main_genesis_header_fields():
    block = build_genesis_block(MAIN_GENESIS)
    assert block.timestamp == 1456082001
    assert block.nonce == 449
    assert block.bits == bytes.fromhex("1e3fffff")
    assert block.prev_block == b'\x00' * 32
    assert block.header.to_bytes().hex() == MAIN_HEADER_HEX


def test_test_genesis_shares_main_coinbase():
    main_block = build_genesis_block(MAIN_GENESIS)
    test_block = build_genesis_block(TEST_GENESIS)

    assert test_block.txs[0].to_bytes() == main_block.txs[0].to_bytes()
    assert test_block.merkle_root == main_block.merkle_root
    assert test_block.nonce == 0
    assert test_block.bits == bytes.fromhex("1f00ffff")
    assert test_block.header.to_bytes().hex() == TEST_HEADER_HEX


def test_genesis_is_deterministic():
    first = build_genesis_block(MAIN_GENESIS)
    second = build_genesis_block(MAIN_GENESIS)
    assert first.merkle_root == second.merkle_root
    assert first.block_hash() == second.block_hash()
    assert first.to_bytes() == second.to_bytes()


def test_check_genesis_with_header_hasher():
    hasher = main_hasher()
    main_block = build_genesis_block(MAIN_GENESIS)
    test_block = build_genesis_block(TEST_GENESIS)

    assert check_genesis("main", main_block, MAIN_GENESIS_HASH, MAIN_GENESIS_MERKLE_ROOT, hasher) == \
           MAIN_GENESIS_HASH
    assert check_genesis("testnet", test_block, TEST_GENESIS_HASH, MAIN_GENESIS_MERKLE_ROOT, hasher) == \
           TEST_GENESIS_HASH


def test_check_genesis_without_hasher_pins_declared_hash():
    block = build_genesis_block(MAIN_GENESIS)
    assert check_genesis("main", block, MAIN_GENESIS_HASH, MAIN_GENESIS_MERKLE_ROOT) == MAIN_GENESIS_HASH


def test_altered_timestamp_text_aborts():
    block = build_genesis_block(replace(MAIN_GENESIS, timestamp_text="2016 FootyCash launches"))
    with pytest.raises(GenesisMismatchError) as exc_info:
        check_genesis("main", block, MAIN_GENESIS_HASH, MAIN_GENESIS_MERKLE_ROOT)

    assert exc_info.value.field == "merkle root"
    assert exc_info.value.expected == MAIN_GENESIS_MERKLE_ROOT
    assert MAIN_MERKLE_DISPLAY in str(exc_info.value)


def test_altered_nonce_aborts_when_hash_is_checked():
    block = build_genesis_block(replace(MAIN_GENESIS, nonce=450))
    with pytest.raises(GenesisMismatchError) as exc_info:
        check_genesis("main", block, MAIN_GENESIS_HASH, MAIN_GENESIS_MERKLE_ROOT, main_hasher())
    assert exc_info.value.field == "block hash"


@pytest.mark.parametrize("field, value", [("tx_time", 1456082002), ("script_bignum", 43), ("tx_version", 2)])
def test_altered_coinbase_field_changes_merkle_root(field, value):
    block = build_genesis_block(replace(MAIN_GENESIS, **{field: value}))
    assert block.merkle_root != MAIN_GENESIS_MERKLE_ROOT


def test_build_params_verify_with_hasher(rng, now):
    main = build_main_params(main_hasher(), rng, now)
    testnet = build_testnet_params(main, main_hasher(), rng, now)

    assert main.genesis_hash[::-1].hex() == MAIN_HASH_DISPLAY
    assert testnet.genesis_hash[::-1].hex() == TEST_HASH_DISPLAY


def test_build_params_abort_on_wrong_hash_algorithm(rng, now):
    wrong = pinned_hasher({})
    with pytest.raises(GenesisMismatchError):
        build_main_params(wrong, rng, now)


def test_uint256_literal():
    assert uint256("0x" + MAIN_HASH_DISPLAY) == MAIN_GENESIS_HASH
    assert uint256(MAIN_HASH_DISPLAY)[-4:] == b'\x5e\x00\x00\x00'
    with pytest.raises(ValueError):
        uint256("00ff")


def test_custom_genesis_spec_defaults():
    spec = GenesisSpec(timestamp_text="t", tx_time=1, time=2, bits=bytes.fromhex("207fffff"), nonce=3)
    block = build_genesis_block(spec)
    assert block.version == 1
    assert block.txs[0].version == 1
    assert block.txs[0].locktime == 0
    assert block.txs[0].inputs[0].scriptsig == bytes.fromhex("00012a01") + b"t"
