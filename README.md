# huffpress

Huffman compression for text files.

huffpress counts how often each printable ASCII character (bytes 32 to 126) appears in a
file. It builds a Huffman tree from those counts and writes a compact binary file. It then
decodes that file again and reports how much space was saved.

## Installation

```
pip install .
```

## Command line

```
huffpress [-i INPUT] [-c COMPRESSED] [-o OUTPUT]
```

| Option | Default | Meaning |
| --- | --- | --- |
| `-i`, `--input` | `Huffman.in` | file to compress |
| `-c`, `--compressed` | `Huffman.bin` | compressed file to write |
| `-o`, `--output` | `Huffman.out` | decoded file to write |

The command does the following:

1. It reads the input file and counts its printable characters.
2. It builds the Huffman tree and writes the compressed data to the compressed file.
3. It decodes the compressed file into the output file.
4. It prints the sizes of the input and compressed files, the percentage saved, and then
   each symbol followed by its code, in order of symbol.

If the input cannot be read, or it holds no printable characters, the command prints an
error to standard error and exits with status 1.

## File format

The compressed file holds these parts, in this order:

- A 4-byte little-endian signature, `0xDEADEAEF`.
- A 2-byte little-endian tree size, equal to `3 * symbols - 1`.
- The tree written in post-order. A leaf is written as its own character and an inner
  node as `$`. A newline ends the tree.
- The encoded bits, packed from the most significant bit down. The last byte is padded
  with zero bits.

In the code table a step to the right child adds a `1` and a step to the left child adds
a `0`.

## Library use

All data is handled as `bytes` and binary streams.

```python
import io

from huffpress.reader import histogram_of
from huffpress.huffman import build_tree
from huffpress.app import code_table, compress, decompress

text = b"abracadabra"
root = build_tree(histogram_of(text))
table = code_table(root)

packed = io.BytesIO()
compress(text, table, root, packed)

packed.seek(0)
restored = io.BytesIO()
decompress(packed, restored)
print(restored.getvalue())  # b'abracadabra'
```

The functions in `huffpress.app`:

- `code_table(root)` maps each leaf symbol to its `Code`.
- `write_tree(root, out)` writes the post-order tree.
- `compress(text, table, root, out)` writes the whole compressed file.
- `rebuild_tree(stack)` rebuilds a tree from a stack of nodes.
- `decompress(stream, out)` writes the decoded bytes to `out` and returns the code table.
  It raises `ValueError` when the stream does not start with the signature.
- `file_size(path)` returns a file's size in bytes.
- `main(argv=None)` runs the command.

Other modules:

- `huffpress.reader`: `histogram_of(text)` counts printable bytes into a list of 256
  counts; `read_data(path)` returns a file's histogram and its contents.
- `huffpress.huffman`: `build_tree(histogram)` builds the tree and raises `ValueError`
  if every count is zero or the histogram has more than 256 entries. `higher_frequency(a, b)`
  is the queue relation it uses.
- `huffpress.code.Code`: a bit sequence of at most 32 bits, with `push_bit`, `pop_bit`,
  `get_bit`, `is_full`, `copy`, `len()`, iteration, `str()`, equality, ordering and hashing.
- `huffpress.node.Node`: a tree node with `symbol`, `frequency`, `left` and `right`,
  plus `Node.combine(left, right)` and `is_leaf()`.
- `huffpress.priority_queue.PriorityQueue`: a queue kept in order by a relation you supply,
  with `push`, `top`, `pop`, `is_empty` and `len()`. `top` and `pop` raise `IndexError` on
  an empty queue.

## Limitations

- Only printable ASCII characters are encoded. Other bytes, including newlines, are left
  out of the compressed data and do not come back when decoding.
- The `$` character also marks inner nodes in the stored tree, so input that contains `$`
  does not decode correctly.
- Input with only one distinct character gets an empty code and decodes to nothing.
- Codes are limited to 32 bits.
- The command always compresses and decodes in one run; there is no command that only
  decompresses an existing file.