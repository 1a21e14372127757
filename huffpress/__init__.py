"""Huffman compression of printable text into a self-describing binary format, and decoding back."""

__version__ = "0.1.0"