"""
The Block classes
"""
from datetime import datetime, timezone
from typing import Callable, Iterable

from footycash.core import SERIALIZED, get_stream, read_stream, read_little_int, BLOCK, Serializable, Immutable, \
    ReadError
from footycash.crypto import hash256
from footycash.data import bits_to_target, MerkleTree, read_compact_size, write_compact_size
from footycash.tx import Transaction

__all__ = ["HeaderHasher", "BlockHeader", "Block"]

# Maps the 80 serialized header bytes to the block hash in natural byte order
HeaderHasher = Callable[[bytes], bytes]


class BlockHeader(Immutable, Serializable):
    """
    ---------------------------------------------------------------------
    |   Name        |   data_type   |   format              |   size    |
    ---------------------------------------------------------------------
    |   Version     |   int         |   little-endian       |   4       |
    |   prev_block  |   bytes       |   natural byte order  |   32      |
    |   merkle_root |   bytes       |   natural byte order  |   32      |
    |   time        |   int         |   little-endian       |   4       |
    |   bits        |   bytes       |   little-endian       |   4       |
    |   nonce       |   int         |   little-endian       |   4       |
    ---------------------------------------------------------------------
    bits is held in its big-endian compact form (exponent first) and reversed on the wire.
    """
    __slots__ = ('version', 'prev_block', 'merkle_root', 'timestamp', 'bits', 'nonce')

    def __init__(self, version: int, prev_block: bytes, merkle_root: bytes, timestamp: int, bits: bytes,
                 nonce: int):
        self.version = version
        self.prev_block = prev_block
        self.merkle_root = merkle_root
        self.timestamp = timestamp
        self.bits = bits
        self.nonce = nonce
        self._freeze()

    def block_hash(self, hasher: HeaderHasher = hash256) -> bytes:
        return hasher(self.to_bytes())

    @property
    def target(self) -> int:
        return bits_to_target(self.bits)

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, BLOCK.VERSION, "version")
        prev_block = read_stream(stream, BLOCK.PREV_BLOCK, "prev_block")
        merkle_root = read_stream(stream, BLOCK.MERKLE_ROOT, "merkle_root")
        timestamp = read_little_int(stream, BLOCK.TIME, "time")
        bits = read_stream(stream, BLOCK.BITS, "bits")[::-1]
        nonce = read_little_int(stream, BLOCK.NONCE, "nonce")

        return cls(version, prev_block, merkle_root, timestamp, bits, nonce)

    def to_bytes(self) -> bytes:
        parts = [
            self.version.to_bytes(BLOCK.VERSION, "little"),
            self.prev_block,
            self.merkle_root,
            self.timestamp.to_bytes(BLOCK.TIME, "little"),
            self.bits[::-1],
            self.nonce.to_bytes(BLOCK.NONCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "previous_block": self.prev_block[::-1].hex(),
            "merkle_root": self.merkle_root[::-1].hex(),
            "timestamp": datetime.fromtimestamp(self.timestamp, tz=timezone.utc).strftime(BLOCK.TIMESTAMP_FORMAT),
            "bits": self.bits.hex(),
            "nonce": self.nonce
        }


class Block(Immutable, Serializable):
    """
    ---------------------------------------------------------------------
    |                       BlockHeader                                 |
    ---------------------------------------------------------------------
    |                       Transactions                                |
    ---------------------------------------------------------------------
    |   tx_num      |   int         |   CompactSize         |   var     |
    |   txs         |   tuple       |   Transaction         |   var     |
    ---------------------------------------------------------------------
    The merkle root is derived from the transactions when the block is built. Blocks are immutable, so the root
    always matches txs.
    """
    __slots__ = ('version', 'prev_block', 'timestamp', 'bits', 'nonce', 'txs', 'merkle_root')

    def __init__(self, version: int, prev_block: bytes, timestamp: int, bits: bytes, nonce: int,
                 txs: Iterable[Transaction]):
        self.version = version
        self.prev_block = prev_block
        self.timestamp = timestamp
        self.bits = bits
        self.nonce = nonce
        self.txs = tuple(txs)
        self.merkle_root = MerkleTree([t.txid for t in self.txs]).merkle_root
        self._freeze()

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        header = BlockHeader.from_bytes(stream)
        tx_num = read_compact_size(stream)
        if tx_num == 0:
            raise ReadError("Error reading stream. Block contains no transactions.")
        txs = [Transaction.from_bytes(stream) for _ in range(tx_num)]

        return cls(header.version, header.prev_block, header.timestamp, header.bits, header.nonce, txs)

    @property
    def merkle_tree(self) -> MerkleTree:
        return MerkleTree([t.txid for t in self.txs])

    @property
    def header(self) -> BlockHeader:
        return BlockHeader(
            version=self.version,
            prev_block=self.prev_block,
            merkle_root=self.merkle_root,
            timestamp=self.timestamp,
            bits=self.bits,
            nonce=self.nonce
        )

    def block_hash(self, hasher: HeaderHasher = hash256) -> bytes:
        return self.header.block_hash(hasher)

    def to_bytes(self) -> bytes:
        tx_parts = [write_compact_size(len(self.txs))] + [tx.to_bytes() for tx in self.txs]
        return self.header.to_bytes() + b''.join(tx_parts)

    def to_dict(self) -> dict:
        return {
            "header": self.header.to_dict(),
            "tx_num": len(self.txs),
            "txs": [tx.to_dict() for tx in self.txs]
        }
