"""
Methods for base58 and base58check encoding
"""
import re

from footycash.core import DataEncodingError, DATA
from footycash.crypto import hash256

__all__ = ["BASE58_ALPHABET", "encode_base58", "decode_base58", "encode_base58check", "decode_base58check"]

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def encode_base58(data: bytes) -> str:
    """
    We return the base58 encoding of the given bytes data
    """
    base = len(BASE58_ALPHABET)
    n = int.from_bytes(data, byteorder="big")
    encoded_string = ""

    while n > 0:
        n, temp_index = divmod(n, base)
        encoded_string = BASE58_ALPHABET[temp_index] + encoded_string

    # Each leading zero byte is a leading '1'
    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return ("1" * leading_zeros) + encoded_string


def decode_base58(data: str) -> bytes:
    """
    Given a base58 encoded string, return the underlying bytes.
    """
    total = 0
    for char in data:
        char_i = BASE58_ALPHABET.find(char)
        if char_i < 0:
            raise DataEncodingError(f"Invalid base58 character: {char!r}")
        total = total * 58 + char_i

    decoded_bytes = total.to_bytes((total.bit_length() + 7) // 8, "big")

    leading_zeros = len(re.match(r"^1*", data).group(0))
    return (b'\x00' * leading_zeros) + decoded_bytes


def encode_base58check(data: bytes) -> str:
    """
    Given bytes data, we return the base58 encoding along with checksum
    """
    checksum = hash256(data)[:DATA.CHECKSUM]
    return encode_base58(data + checksum)


def decode_base58check(data: str) -> bytes:
    """
    Given a string of base58check chars, return the payload without the checksum.
    Raise DataEncodingError if checksum fails
    """
    decoded = decode_base58(data)
    if len(decoded) < DATA.CHECKSUM:
        raise DataEncodingError("Base58check string too short to carry a checksum")

    payload, checksum = decoded[:-DATA.CHECKSUM], decoded[-DATA.CHECKSUM:]
    if hash256(payload)[:DATA.CHECKSUM] != checksum:
        raise DataEncodingError("Decoded checksum does not equal given checksum")
    return payload
