"""
The ScriptBuilder class for push-only scripts, such as the coinbase scriptSig.
"""
from footycash.core import SCRIPT, ScriptError

__all__ = ["ScriptBuilder", "encode_bignum"]


def encode_bignum(num: int) -> bytes:
    """
    Minimal little-endian sign-magnitude encoding of an integer, as used for numbers pushed onto the stack.
    Zero encodes to the empty byte string.
    """
    if num == 0:
        return b''

    magnitude = abs(num)
    encoded = bytearray(magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "little"))

    # High bit of the last byte is the sign bit
    if encoded[-1] & 0x80:
        encoded.append(0x80 if num < 0 else 0x00)
    elif num < 0:
        encoded[-1] |= 0x80

    return bytes(encoded)


class ScriptBuilder:
    """
    Accumulates script elements. Each push method returns the builder so calls can be chained:

        ScriptBuilder().push_int(0).push_bignum(42).push_data(b"text").script
    """

    def __init__(self):
        self._parts: list[bytes] = []

    @property
    def script(self) -> bytes:
        return b''.join(self._parts)

    def push_data(self, item: bytes) -> "ScriptBuilder":
        """
        For a given item, append the corresponding OP_CODES + Data for a datapush
        """
        length = len(item)
        if length < SCRIPT.OP_PUSHDATA1:
            prefix = length.to_bytes(1, "little")
        elif length <= 0xff:
            prefix = bytes([SCRIPT.OP_PUSHDATA1]) + length.to_bytes(1, "little")
        elif length <= 0xffff:
            prefix = bytes([SCRIPT.OP_PUSHDATA2]) + length.to_bytes(2, "little")
        elif length <= 0xffffffff:
            prefix = bytes([SCRIPT.OP_PUSHDATA4]) + length.to_bytes(4, "little")
        else:
            raise ScriptError(f"Push data too large: {length} bytes")

        self._parts.append(prefix + item)
        return self

    def push_int(self, num: int) -> "ScriptBuilder":
        """
        Small integers use their dedicated opcodes (OP_0, OP_1NEGATE, OP_1..OP_16); anything else is a bignum push.
        """
        if num == 0:
            self._parts.append(bytes([SCRIPT.OP_0]))
        elif num == -1:
            self._parts.append(bytes([SCRIPT.OP_1NEGATE]))
        elif 1 <= num <= 16:
            self._parts.append(bytes([SCRIPT.OP_1 + num - 1]))
        else:
            self.push_bignum(num)
        return self

    def push_bignum(self, num: int) -> "ScriptBuilder":
        """
        Always a data push, even for small values: bignum 42 is 0x01 0x2a, not an opcode.
        """
        return self.push_data(encode_bignum(num))

    def push_text(self, text: str) -> "ScriptBuilder":
        return self.push_data(text.encode("ascii"))
