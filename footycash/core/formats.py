"""
The FootyCash standard formats
"""
from typing import Final

__all__ = ["DATA", "TX", "BLOCK", "SCRIPT", "NETWORK", "COIN", "CENT"]

# --- MONETARY UNITS --- #
COIN: Final[int] = 100_000_000
CENT: Final[int] = 1_000_000


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE: Final[int] = 0xffffffffffffffff
    BITS: Final[int] = 4
    TARGET: Final[int] = 32
    HASH: Final[int] = 32
    CHECKSUM: Final[int] = 4


class TX:
    """
    Transaction byte sizes. Transactions carry their own timestamp.
    """
    TXID: Final[int] = 32
    VOUT: Final[int] = 4
    SEQUENCE: Final[int] = 4
    AMOUNT: Final[int] = 8
    VERSION: Final[int] = 4
    TIME: Final[int] = 4
    LOCKTIME: Final[int] = 4
    NULL_INDEX: Final[int] = 0xffffffff
    FINAL_SEQUENCE: Final[int] = 0xffffffff


class BLOCK:
    """
    Block header byte sizes
    """
    VERSION: Final[int] = 4
    PREV_BLOCK: Final[int] = 32
    MERKLE_ROOT: Final[int] = 32
    TIME: Final[int] = 4
    BITS: Final[int] = 4
    NONCE: Final[int] = 4
    HEADER: Final[int] = 80
    TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class SCRIPT:
    """
    Opcodes needed to build push-only scripts
    """
    OP_0: Final[int] = 0x00
    OP_PUSHDATA1: Final[int] = 0x4c
    OP_PUSHDATA2: Final[int] = 0x4d
    OP_PUSHDATA4: Final[int] = 0x4e
    OP_1NEGATE: Final[int] = 0x4f
    OP_1: Final[int] = 0x51
    OP_16: Final[int] = 0x60


class NETWORK:
    """
    Constants for the p2p layer
    """
    MESSAGE_START_SIZE: Final[int] = 4
    IP_BYTES: Final[int] = 16
    PORT_BYTES: Final[int] = 2
    TIME_BYTES: Final[int] = 4
    SERVICES_BYTES: Final[int] = 8
    ONE_WEEK: Final[int] = 7 * 24 * 60 * 60
    MAX_FUTURE_DRIFT: Final[int] = 10 * 60
