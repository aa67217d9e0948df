"""
Test utilities
"""

__all__ = ["FIXED_NOW", "MAIN_HEADER_HEX", "TEST_HEADER_HEX", "pinned_hasher"]

FIXED_NOW = 1_700_000_000

GENESIS_MERKLE_NATURAL = "06843271ae4a0932f2bd9f8b4b5d37643649e878d8b412937c4c98e2ec8d444e"

# version || prev_block || merkle_root || time || bits (LE) || nonce (LE)
MAIN_HEADER_HEX = "01000000" + "00" * 32 + GENESIS_MERKLE_NATURAL + "510cca56" + "ffff3f1e" + "c1010000"
TEST_HEADER_HEX = "01000000" + "00" * 32 + GENESIS_MERKLE_NATURAL + "510cca56" + "ffff001f" + "00000000"


def pinned_hasher(known: dict[bytes, bytes]):
    """
    Stand-in for the proof-of-work header hash: known headers map to their hash, anything else to junk.
    """

    def _hasher(header: bytes) -> bytes:
        return known.get(header, b'\xee' * 32)

    return _hasher
