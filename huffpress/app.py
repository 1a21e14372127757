"""Compressing a file into the Huffman container format and reading it back."""

from __future__ import annotations

import argparse
import os
import struct
import sys
from collections.abc import Mapping
from os import PathLike
from typing import BinaryIO

from .code import Code
from .huffman import MAGIC, build_tree
from .node import INTERNAL_SYMBOL, Node
from .priority_queue import PriorityQueue
from .reader import read_data

_NEWLINE = ord("\n")
_HEADER = struct.Struct("<IH")


def file_size(path: str | PathLike[str]) -> int:
    """Return the size of a file in bytes."""
    return os.path.getsize(path)


def code_table(root: Node | None) -> dict[int, Code]:
    """Map each leaf symbol of the tree to its code, ordered by symbol.

    A step to the right adds a 1, a step to the left adds a 0.
    """
    table: dict[int, Code] = {}
    current = Code()

    def visit(node: Node | None) -> None:
        if node is None:
            return
        if node.is_leaf():
            table[node.symbol] = current.copy()
            return
        if node.right is not None:
            current.push_bit(1)
            visit(node.right)
            current.pop_bit()
        if node.left is not None:
            current.push_bit(0)
            visit(node.left)
            current.pop_bit()

    visit(root)
    return dict(sorted(table.items()))


def write_tree(root: Node | None, out: BinaryIO) -> None:
    """Write the tree in post-order: leaf symbols, ``$`` for joining nodes."""
    if root is None:
        return
    write_tree(root.left, out)
    write_tree(root.right, out)
    symbol = root.symbol if root.is_leaf() else INTERNAL_SYMBOL
    out.write(bytes((symbol,)))


def compress(text: bytes, table: Mapping[int, Code], root: Node | None, out: BinaryIO) -> None:
    """Write the header, the tree and the packed codes of ``text``.

    Bytes without a code contribute nothing. Bits fill each byte from the
    most significant end; the last byte is padded with zeros.
    """
    tree_size = (3 * len(table) - 1) & 0xFFFF
    out.write(_HEADER.pack(MAGIC, tree_size))
    write_tree(root, out)
    out.write(bytes((_NEWLINE,)))

    packed = bytearray()
    mask = 0
    count = 0
    for byte in text:
        code = table.get(byte)
        if code is None:
            continue
        for bit in code:
            if bit:
                mask |= 1 << (7 - count)
            count += 1
            if count == 8:
                packed.append(mask)
                mask = 0
                count = 0
    if count:
        packed.append(mask)
    out.write(bytes(packed))


def rebuild_tree(stack: PriorityQueue[Node]) -> Node | None:
    """Rebuild a tree from nodes popped in root, right, left order."""
    if stack.is_empty():
        return None
    node = stack.pop()
    if node.symbol == INTERNAL_SYMBOL:
        node.right = rebuild_tree(stack)
        node.left = rebuild_tree(stack)
    return node


def decompress(stream: BinaryIO, out: BinaryIO) -> dict[int, Code]:
    """Decode a compressed stream into ``out`` and return the code table.

    Raises ValueError when the stream does not start with the signature.
    """
    header = stream.read(_HEADER.size)
    if len(header) < 4 or struct.unpack("<I", header[:4])[0] != MAGIC:
        raise ValueError("invalid signature")

    stack: PriorityQueue[Node] = PriorityQueue(lambda _a, _b: True)
    while True:
        chunk = stream.read(1)
        if not chunk or chunk[0] == _NEWLINE:
            break
        byte = chunk[0]
        if 32 <= byte <= 126:
            stack.push(Node(byte, 0))

    table = code_table(rebuild_tree(stack))
    reversed_table: dict[Code, int] = {}
    for symbol, code in table.items():
        reversed_table.setdefault(code, symbol)

    decoded = bytearray()
    code = Code()
    for byte in stream.read():
        for shift in range(7, -1, -1):
            if not code.is_full():
                code.push_bit((byte >> shift) & 1)
            symbol = reversed_table.get(code)
            if symbol is not None:
                decoded.append(symbol)
                code = Code()
    out.write(bytes(decoded))
    return table


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="huffpress", description="Compress a file with Huffman codes and decode it again."
    )
    parser.add_argument("-i", "--input", default="Huffman.in", help="file to compress")
    parser.add_argument("-c", "--compressed", default="Huffman.bin", help="compressed file to write")
    parser.add_argument("-o", "--output", default="Huffman.out", help="decoded file to write")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Compress the input, decode it back and report the sizes and codes."""
    args = _parse_args(argv)
    try:
        histogram, text = read_data(args.input)
        root = build_tree(histogram)
    except (OSError, ValueError) as error:
        print(f"huffpress: {error}", file=sys.stderr)
        return 1

    table = code_table(root)
    with open(args.compressed, "wb") as out:
        compress(text, table, root, out)
    with open(args.compressed, "rb") as stream, open(args.output, "wb") as out:
        decompress(stream, out)

    initial = file_size(args.input)
    compressed = file_size(args.compressed)
    print(f"Initial file : {initial} bytes")
    print(f"Compressed file : {compressed} bytes")
    saved = (1.0 - compressed / initial) * 100
    print(f"Reduced by {saved:g}% compared with initial size.")
    print()
    for symbol, code in table.items():
        print(f"{chr(symbol)} {code}")
    return 0