"""Nodes of a Huffman tree."""

from __future__ import annotations

from dataclasses import dataclass, field

INTERNAL_SYMBOL = ord("$")
"""Symbol carried by nodes that join two subtrees."""


@dataclass(eq=False)
class Node:
    """A tree node holding a byte symbol and its frequency."""

    symbol: int
    frequency: int
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)

    @staticmethod
    def combine(left: Node, right: Node) -> Node:
        """Join two subtrees under a new internal node."""
        return Node(INTERNAL_SYMBOL, left.frequency + right.frequency, left, right)

    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return self.left is None and self.right is None