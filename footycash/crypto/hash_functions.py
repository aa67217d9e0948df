"""
Hash functions
"""
import hashlib

from ripemd.ripemd160 import ripemd160 as _ripemd160

__all__ = ["sha256", "hash256", "ripemd160", "hash160"]


def sha256(encoded_data: bytes) -> bytes:
    return hashlib.sha256(encoded_data).digest()


def hash256(encoded_data: bytes) -> bytes:
    """
    SHA256(SHA256(data)). Used for txids, merkle nodes, block ids and base58check checksums.
    """
    return sha256(sha256(encoded_data))


def ripemd160(encoded_data: bytes) -> bytes:
    # hashlib only exposes ripemd160 when the linked OpenSSL still ships it
    return bytes(_ripemd160(encoded_data))


def hash160(encoded_data: bytes) -> bytes:
    """
    RIPEMD160(SHA256(data)) - 20 bytes. The payload of pubkey addresses.
    """
    return ripemd160(sha256(encoded_data))
