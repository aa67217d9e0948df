"""
Tests for the MerkleTree class
"""
from secrets import token_bytes

import pytest

from footycash.core import MerkleError
from footycash.crypto import hash256
from footycash.data import MerkleTree


def test_single_leaf_is_root():
    leaf = token_bytes(32)
    tree = MerkleTree([leaf])
    assert tree.height == 0
    assert tree.merkle_root == leaf


def test_merkle_tree():
    """
    r1 + r2 = r_12, r3 + r3 = r_33,
    r_12 + r_33 = root
    """
    r1, r2, r3 = token_bytes(32), token_bytes(32), token_bytes(32)
    tree = MerkleTree([r1, r2, r3])

    r_12 = hash256(r1 + r2)
    r_33 = hash256(r3 + r3)

    assert tree.height == 2
    assert tree.tree[2] == [r1, r2, r3, r3]
    assert tree.tree[1] == [r_12, r_33]
    assert tree.merkle_root == hash256(r_12 + r_33)


def test_input_list_untouched():
    ids = [token_bytes(32) for _ in range(3)]
    MerkleTree(ids)
    assert len(ids) == 3


def test_invalid_leaves():
    with pytest.raises(MerkleError):
        MerkleTree([])
    with pytest.raises(MerkleError):
        MerkleTree([b'\x00' * 31])
