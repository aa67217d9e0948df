"""
Genesis block construction and verification.

The genesis block holds a single coinbase transaction whose scriptSig is
    OP_0 | push(bignum 42) | push(timestamp text)
and whose only output is empty. The output can never be spent: it did not exist in the database.

Block-level fields are fixed per network. Both the merkle root and the block hash are derived from them and then
checked against the literals the network declares. A mismatch means a corrupted build or a hashing regression, and
the node must not start.
"""
from dataclasses import dataclass
from typing import Optional

from footycash.block import Block, HeaderHasher
from footycash.core import GenesisMismatchError, BLOCK
from footycash.core.logging import get_logger
from footycash.script import ScriptBuilder
from footycash.tx import Transaction, TxInput, TxOutput

logger = get_logger(__name__)

__all__ = ["GenesisSpec", "genesis_scriptsig", "build_genesis_block", "check_genesis"]


@dataclass(frozen=True, slots=True)
class GenesisSpec:
    timestamp_text: str
    tx_time: int
    time: int
    bits: bytes
    nonce: int
    version: int = 1
    tx_version: int = 1
    tx_locktime: int = 0
    script_int: int = 0
    script_bignum: int = 42


def genesis_scriptsig(spec: GenesisSpec) -> bytes:
    return ScriptBuilder().push_int(spec.script_int).push_bignum(spec.script_bignum).push_text(
        spec.timestamp_text).script


def build_genesis_block(spec: GenesisSpec) -> Block:
    coinbase = Transaction(
        version=spec.tx_version,
        time=spec.tx_time,
        inputs=[TxInput.coinbase(genesis_scriptsig(spec))],
        outputs=[TxOutput.empty()],
        locktime=spec.tx_locktime
    )
    return Block(
        version=spec.version,
        prev_block=b'\x00' * BLOCK.PREV_BLOCK,
        timestamp=spec.time,
        bits=spec.bits,
        nonce=spec.nonce,
        txs=[coinbase]
    )


def check_genesis(network: str, block: Block, expected_hash: bytes, expected_merkle_root: bytes,
                  header_hasher: Optional[HeaderHasher] = None) -> bytes:
    """
    Verify a freshly built genesis block against the network's literals and return its hash.

    The merkle root is always recomputed. The block hash is recomputed when the proof-of-work header hasher is
    supplied; otherwise the declared hash is the block's identity.

    Raises:
        GenesisMismatchError: on any mismatch. Callers must not continue.
    """
    merkle_root = block.merkle_root
    if merkle_root != expected_merkle_root:
        raise GenesisMismatchError(network, "merkle root", expected_merkle_root, merkle_root)

    if header_hasher is None:
        logger.debug(f"{network} genesis hash pinned to {expected_hash[::-1].hex()}")
        return expected_hash

    block_hash = block.block_hash(header_hasher)
    if block_hash != expected_hash:
        raise GenesisMismatchError(network, "block hash", expected_hash, block_hash)

    logger.debug(f"{network} genesis verified: {block_hash[::-1].hex()}")
    return block_hash
