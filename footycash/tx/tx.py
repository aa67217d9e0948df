"""
The classes for FootyCash transactions. Transactions carry a timestamp after the version, as required for
proof-of-stake kernels.
"""
from typing import Iterable

from footycash.core import Immutable, Serializable, SERIALIZED, get_stream, read_little_int, read_stream, TX
from footycash.crypto import hash256
from footycash.data import read_compact_size, write_compact_size

__all__ = ["TxInput", "TxOutput", "Transaction"]

NULL_TXID = b'\x00' * TX.TXID


class TxInput(Immutable, Serializable):
    """
    =============================================================================
    |   name            |   data type   |   format              |   byte size   |
    =============================================================================
    |   txid            |   bytes       |   natural byte order  |   32          |
    |   vout            |   int         |   little-endian       |   4           |
    |   scriptsig_size  |               |   compactSize         |   var         |
    |   scriptsig       |   bytes       |   script bytes        |   var         |
    |   sequence        |   int         |   little-endian       |   4           |
    =============================================================================
    """
    __slots__ = ("txid", "vout", "scriptsig", "sequence")

    def __init__(self, txid: bytes, vout: int, scriptsig: bytes, sequence: int = TX.FINAL_SEQUENCE):
        self.txid = txid
        self.vout = vout
        self.scriptsig = scriptsig
        self.sequence = sequence
        self._freeze()

    @classmethod
    def coinbase(cls, scriptsig: bytes):
        """
        An input spending the null outpoint
        """
        return cls(NULL_TXID, TX.NULL_INDEX, scriptsig)

    @property
    def is_coinbase(self) -> bool:
        return self.txid == NULL_TXID and self.vout == TX.NULL_INDEX

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        txid = read_stream(stream, TX.TXID, "txid")
        vout = read_little_int(stream, TX.VOUT, "vout")
        scriptsig_size = read_compact_size(stream)
        scriptsig = read_stream(stream, scriptsig_size, "scriptsig")
        sequence = read_little_int(stream, TX.SEQUENCE, "sequence")

        return cls(txid, vout, scriptsig, sequence)

    def to_bytes(self) -> bytes:
        """
        txid || vout || scriptsig_size || scriptsig || sequence
        """
        parts = [
            self.txid,
            self.vout.to_bytes(TX.VOUT, "little"),
            write_compact_size(len(self.scriptsig)),
            self.scriptsig,
            self.sequence.to_bytes(TX.SEQUENCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": self.txid[::-1].hex(),
            "vout": self.vout,
            "scriptsig": self.scriptsig.hex(),
            "sequence": self.sequence
        }


class TxOutput(Immutable, Serializable):
    """
    -----------------------------------------------------------------
    |   Field               |   Byte Size   |   Format              |
    -----------------------------------------------------------------
    |   Amount              |   8           |   little-endian       |
    |   scriptpubkey_size   |   var         |   CompactSize         |
    |   scriptpubkey        |   var         |   Script              |
    -----------------------------------------------------------------
    """
    __slots__ = ("amount", "scriptpubkey")

    def __init__(self, amount: int, scriptpubkey: bytes):
        self.amount = amount
        self.scriptpubkey = scriptpubkey
        self._freeze()

    @classmethod
    def empty(cls):
        """
        Zero value, empty script. Marks coinstake transactions and the unspendable genesis output.
        """
        return cls(0, b'')

    @property
    def is_empty(self) -> bool:
        return self.amount == 0 and not self.scriptpubkey

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        amount = read_little_int(stream, TX.AMOUNT, "amount")
        scriptpubkey_size = read_compact_size(stream)
        scriptpubkey = read_stream(stream, scriptpubkey_size, "scriptpubkey")

        return cls(amount, scriptpubkey)

    def to_bytes(self) -> bytes:
        """
        amount || scriptpubkey_size || scriptpubkey
        """
        return self.amount.to_bytes(TX.AMOUNT, "little") + write_compact_size(len(self.scriptpubkey)) + \
            self.scriptpubkey

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "scriptpubkey": self.scriptpubkey.hex()
        }


class Transaction(Immutable, Serializable):
    """
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Version         |   4           |   little-endian       |
    |   Time            |   4           |   little-endian       |
    |   input_count     |   var         |   CompactSize         |
    |   inputs          |   var         |   TxInput             |
    |   output_count    |   var         |   CompactSize         |
    |   outputs         |   var         |   TxOutput            |
    |   locktime        |   4           |   little-endian       |
    -------------------------------------------------------------
    """
    __slots__ = ("version", "time", "inputs", "outputs", "locktime")

    def __init__(self, version: int, time: int, inputs: Iterable[TxInput] = (), outputs: Iterable[TxOutput] = (),
                 locktime: int = 0):
        self.version = version
        self.time = time
        self.inputs = tuple(inputs)
        self.outputs = tuple(outputs)
        self.locktime = locktime
        self._freeze()

    @property
    def txid(self) -> bytes:
        """Natural byte order. Reverse for display."""
        return hash256(self.to_bytes())

    @property
    def is_coinbase(self) -> bool:
        return len(self.inputs) == 1 and self.inputs[0].is_coinbase

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, TX.VERSION, "version")
        time = read_little_int(stream, TX.TIME, "time")
        inputs = [TxInput.from_bytes(stream) for _ in range(read_compact_size(stream))]
        outputs = [TxOutput.from_bytes(stream) for _ in range(read_compact_size(stream))]
        locktime = read_little_int(stream, TX.LOCKTIME, "locktime")

        return cls(version, time, inputs, outputs, locktime)

    def to_bytes(self) -> bytes:
        parts = [
            self.version.to_bytes(TX.VERSION, "little"),
            self.time.to_bytes(TX.TIME, "little"),
            write_compact_size(len(self.inputs)),
            *(i.to_bytes() for i in self.inputs),
            write_compact_size(len(self.outputs)),
            *(o.to_bytes() for o in self.outputs),
            self.locktime.to_bytes(TX.LOCKTIME, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": self.txid[::-1].hex(),
            "version": self.version,
            "time": self.time,
            "inputs": [i.to_dict() for i in self.inputs],
            "outputs": [o.to_dict() for o in self.outputs],
            "locktime": self.locktime
        }
