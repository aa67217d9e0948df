"""
Base58check addresses built from a network's prefixes
"""
from footycash.chainparams.params import ChainParams, Base58Type
from footycash.core import DataEncodingError
from footycash.crypto import hash160
from footycash.data import encode_base58check, decode_base58check

__all__ = ["encode_address", "decode_address", "pubkey_to_address"]


def encode_address(params: ChainParams, kind: Base58Type, payload: bytes) -> str:
    return encode_base58check(params.base58_prefix(kind) + payload)


def decode_address(params: ChainParams, address: str) -> tuple[Base58Type, bytes]:
    """
    Return the address kind and payload. The longest matching prefix wins, as main's 3-byte and 4-byte prefixes
    may share leading bytes with other kinds.

    Raises:
        DataEncodingError: bad checksum, or no prefix of this network matches
    """
    data = decode_base58check(address)

    candidates = sorted(params.base58_prefixes.items(), key=lambda item: len(item[1]), reverse=True)
    for kind, prefix in candidates:
        if data.startswith(prefix):
            return kind, data[len(prefix):]

    raise DataEncodingError(f"Address does not belong to the {params.network.name.lower()} network")


def pubkey_to_address(params: ChainParams, pubkey: bytes) -> str:
    return encode_address(params, Base58Type.PUBKEY_ADDRESS, hash160(pubkey))
