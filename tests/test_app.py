import io

import pytest

from huffpress.app import (
    code_table,
    compress,
    decompress,
    file_size,
    main,
    rebuild_tree,
    write_tree,
)
from huffpress.huffman import build_tree
from huffpress.node import Node
from huffpress.priority_queue import PriorityQueue
from huffpress.reader import histogram_of

WORKED = b"abababab"
WORKED_BYTES = b"\xef\xea\xad\xde\x05\x00ab$\n\x55"


def _tree_for(text: bytes) -> Node:
    return build_tree(histogram_of(text))


def _compressed(text: bytes) -> bytes:
    root = _tree_for(text)
    out = io.BytesIO()
    compress(text, code_table(root), root, out)
    return out.getvalue()


def test_file_size(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"hello")
    assert file_size(path) == 5


def test_code_table_two_symbols():
    table = code_table(_tree_for(WORKED))
    assert {symbol: str(code) for symbol, code in table.items()} == {
        ord("a"): "0",
        ord("b"): "1",
    }


def test_code_table_empty_tree():
    assert code_table(None) == {}


def test_code_table_single_leaf_has_empty_code():
    table = code_table(Node(ord("x"), 3))
    assert list(table) == [ord("x")]
    assert len(table[ord("x")]) == 0


def test_code_table_is_prefix_free_and_sorted():
    text = b"the quick brown fox jumps over the lazy dog"
    table = code_table(_tree_for(text))
    assert list(table) == sorted(set(text))
    codes = [str(code) for code in table.values()]
    for a in codes:
        for b in codes:
            if a != b:
                assert not b.startswith(a)


def test_write_tree_post_order():
    out = io.BytesIO()
    write_tree(_tree_for(WORKED), out)
    assert out.getvalue() == b"ab$"


def test_compress_worked_example():
    assert _compressed(WORKED) == WORKED_BYTES


def test_compress_skips_bytes_without_code():
    root = _tree_for(WORKED)
    out = io.BytesIO()
    compress(b"ab\nab\nab\nab", code_table(root), root, out)
    assert out.getvalue() == WORKED_BYTES


def test_rebuild_tree_restores_structure():
    text = b"mississippi river"
    root = _tree_for(text)
    written = io.BytesIO()
    write_tree(root, written)
    stack = PriorityQueue(lambda _a, _b: True)
    for byte in written.getvalue():
        stack.push(Node(byte, 0))
    rebuilt = rebuild_tree(stack)
    again = io.BytesIO()
    write_tree(rebuilt, again)
    assert again.getvalue() == written.getvalue()
    assert stack.is_empty()


def test_rebuild_tree_empty_stack():
    assert rebuild_tree(PriorityQueue(lambda _a, _b: True)) is None


def test_decompress_worked_example():
    out = io.BytesIO()
    table = decompress(io.BytesIO(WORKED_BYTES), out)
    assert out.getvalue() == WORKED
    assert set(table) == {ord("a"), ord("b")}


def test_decompress_round_trip_prefix():
    text = b"the quick brown fox jumps over the lazy dog"
    out = io.BytesIO()
    decompress(io.BytesIO(_compressed(text)), out)
    decoded = out.getvalue()
    assert decoded.startswith(text)
    assert len(decoded) - len(text) < 8


def test_decompress_table_matches_compress_table():
    text = b"aaaabbbcccdde"
    out = io.BytesIO()
    table = decompress(io.BytesIO(_compressed(text)), out)
    assert table == code_table(_tree_for(text))


def test_decompress_rejects_bad_signature():
    with pytest.raises(ValueError):
        decompress(io.BytesIO(b"\x00\x00\x00\x00\x05\x00ab$\n\x55"), io.BytesIO())


def test_decompress_rejects_short_stream():
    with pytest.raises(ValueError):
        decompress(io.BytesIO(b"\xef"), io.BytesIO())


def test_main_writes_files_and_reports(tmp_path, capsys):
    source = tmp_path / "in.txt"
    compressed = tmp_path / "out.bin"
    decoded = tmp_path / "out.txt"
    source.write_bytes(WORKED)
    status = main(["-i", str(source), "-c", str(compressed), "-o", str(decoded)])
    assert status == 0
    assert compressed.read_bytes() == WORKED_BYTES
    assert decoded.read_bytes() == WORKED
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Initial file : 8 bytes"
    assert lines[1] == f"Compressed file : {len(WORKED_BYTES)} bytes"
    assert lines[-2:] == ["a 0", "b 1"]


def test_main_missing_input(tmp_path):
    status = main(["-i", str(tmp_path / "absent"), "-c", str(tmp_path / "b"), "-o", str(tmp_path / "o")])
    assert status == 1


def test_main_empty_input(tmp_path):
    source = tmp_path / "in.txt"
    source.write_bytes(b"")
    status = main(["-i", str(source), "-c", str(tmp_path / "b"), "-o", str(tmp_path / "o")])
    assert status == 1