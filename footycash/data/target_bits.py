"""
Methods for converting between bits and target.
Bits is the 4-byte compact representation of a 256-bit target: one exponent byte followed by a 3-byte coefficient.
"""
from footycash.core import DATA, TargetBitsError

__all__ = ["bits_to_target", "target_to_bits", "max_target_shifted"]

MAX_TARGET = (1 << (8 * DATA.TARGET)) - 1


def max_target_shifted(shift: int) -> int:
    """
    Return ~uint256(0) >> shift, the form proof-of-work and proof-of-stake ceilings are declared in
    """
    if not 0 <= shift <= 256:
        raise TargetBitsError(f"Shift out of range for 256-bit target: {shift}")
    return MAX_TARGET >> shift


def bits_to_target(target_bits: bytes) -> int:
    if len(target_bits) != DATA.BITS:
        raise TargetBitsError("Given target bits not of correct length")

    exp = target_bits[0]
    coeff = int.from_bytes(target_bits[1:4], "big")

    if coeff & 0x800000:
        raise TargetBitsError(f"Negative compact target: {target_bits.hex()}")

    if exp <= 3:
        return coeff >> (8 * (3 - exp))
    return coeff << (8 * (exp - 3))


def target_to_bits(target: int) -> bytes:
    if not 0 <= target <= MAX_TARGET:
        raise TargetBitsError("Given target not in 256-bit range")

    target_bytes = target.to_bytes(DATA.TARGET, "big")

    # Find the first significant byte
    first_nonzero = next((i for i, b in enumerate(target_bytes) if b != 0), len(target_bytes))
    exp = DATA.TARGET - first_nonzero

    # First 3 significant bytes, zero padded
    coeff = target_bytes[first_nonzero:first_nonzero + 3].ljust(3, b'\x00')

    # Coefficient high bit is the sign bit: shift right one byte and bump the exponent
    if coeff[0] >= 0x80:
        coeff = b'\x00' + coeff[:2]
        exp += 1

    return exp.to_bytes(1, "big") + coeff
