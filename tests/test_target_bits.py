"""
Tests for compact target encoding
"""
import pytest

from footycash.core import TargetBitsError
from footycash.data import bits_to_target, target_to_bits, max_target_shifted


@pytest.mark.parametrize("shift, bits", [
    (18, "1e3fffff"),
    (16, "1f00ffff"),
    (20, "1e0fffff"),
    (32, "1d00ffff"),
])
def test_pow_limit_compact_encoding(shift, bits):
    assert target_to_bits(max_target_shifted(shift)) == bytes.fromhex(bits)


@pytest.mark.parametrize("bits, target", [
    ("1d00ffff", 0xffff << 208),
    ("1e3fffff", 0x3fffff << 216),
    ("03123456", 0x123456),
    ("02123400", 0x1234),
    ("00000000", 0),
])
def test_bits_to_target(bits, target):
    assert bits_to_target(bytes.fromhex(bits)) == target


def test_compact_is_lossy_but_stable():
    target = max_target_shifted(18)
    bits = target_to_bits(target)
    assert bits_to_target(bits) <= target
    assert target_to_bits(bits_to_target(bits)) == bits


def test_small_and_zero_targets():
    assert target_to_bits(0) == bytes.fromhex("00000000")
    assert target_to_bits(0x80) == bytes.fromhex("02008000")
    assert target_to_bits(0x12) == bytes.fromhex("01120000")


def test_invalid_inputs():
    with pytest.raises(TargetBitsError):
        bits_to_target(b'\x1d\x00\xff')
    with pytest.raises(TargetBitsError):
        bits_to_target(bytes.fromhex("1d800000"))
    with pytest.raises(TargetBitsError):
        target_to_bits(1 << 256)
    with pytest.raises(TargetBitsError):
        max_target_shifted(-1)
