"""
The MerkleTree used to commit a block header to its transactions
"""
import math

from footycash.core import MerkleError, DATA
from footycash.core.logging import get_logger
from footycash.crypto import hash256

logger = get_logger(__name__)

__all__ = ["MerkleTree"]


class MerkleTree:
    """
    A Merkle tree over a list of txids in natural (internal) byte order.

    Attributes:
        height (int): The height of the Merkle tree.
        tree (dict[int, list[bytes]]): The tree levels, 0 being the root and `height` the leaves.
        merkle_root (bytes): The Merkle root in natural byte order.
    """

    def __init__(self, id_list: list[bytes]):
        if not id_list:
            logger.error("Attempted to initialize MerkleTree with an empty list.")
            raise MerkleError("ID list cannot be empty. A Merkle tree requires at least one transaction ID.")
        if any(len(i) != DATA.HASH for i in id_list):
            raise MerkleError("Every leaf of the Merkle tree must be a 32-byte hash")

        self.height = 0 if len(id_list) == 1 else math.ceil(math.log2(len(id_list)))
        self.tree = self._create_tree(list(id_list))
        self.merkle_root = self.tree[0][0]

    def _create_tree(self, leaves: list[bytes]) -> dict[int, list[bytes]]:
        # A single transaction is its own root
        if len(leaves) == 1:
            return {0: leaves}

        tree = {}
        level_nodes = leaves
        for level in range(self.height, 0, -1):
            if len(level_nodes) % 2 != 0:
                level_nodes.append(level_nodes[-1])  # Duplicate last element if odd

            tree[level] = level_nodes
            level_nodes = [hash256(level_nodes[i] + level_nodes[i + 1]) for i in range(0, len(level_nodes), 2)]

        tree[0] = level_nodes
        return tree

    def to_dict(self) -> dict:
        return {
            "height": self.height,
            "merkle_root": self.merkle_root[::-1].hex(),
            "levels": {level: [node[::-1].hex() for node in nodes] for level, nodes in self.tree.items()}
        }
