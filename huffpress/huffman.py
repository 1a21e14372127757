"""Construction of Huffman trees from byte histograms."""

from __future__ import annotations

from collections.abc import Sequence

from .node import Node
from .priority_queue import PriorityQueue

ALPHABET = 256
MAGIC = 0xDEADEAEF
BLOCK = 4096
MAX_TREE_SIZE = 3 * ALPHABET - 1


def higher_frequency(a: Node, b: Node) -> bool:
    """Queue relation that keeps the least frequent node at the front."""
    return a.frequency > b.frequency


def build_tree(histogram: Sequence[int]) -> Node:
    """Build a Huffman tree from counts indexed by byte value.

    Symbols with a zero count are left out. Raises ValueError when every
    count is zero or the histogram is longer than the alphabet.
    """
    if len(histogram) > ALPHABET:
        raise ValueError(f"histogram has more than {ALPHABET} entries")
    queue: PriorityQueue[Node] = PriorityQueue(higher_frequency)
    for symbol, count in enumerate(histogram):
        if count:
            queue.push(Node(symbol, count))
    if queue.is_empty():
        raise ValueError("histogram holds no symbols")
    while len(queue) > 1:
        left = queue.pop()
        right = queue.pop()
        queue.push(Node.combine(left, right))
    return queue.top()