"""Variable-length bit strings used as Huffman codes."""

from __future__ import annotations

from collections.abc import Iterator

MAX_CODE_SIZE = 32
"""Size of a code's bit store in bytes; also the most bits a code may hold."""


class Code:
    """A stack of bits, pushed and popped at the end.

    Bit ``i`` is stored in byte ``i // 8`` at position ``i % 8``, so the byte
    layout (used for ordering) puts the first bit in the low bit of byte 0.
    """

    __slots__ = ("_value", "_length")

    def __init__(self) -> None:
        self._value = 0
        self._length = 0

    def push_bit(self, bit: int) -> None:
        """Append one bit; any truthy value counts as 1."""
        if self.is_full():
            raise OverflowError(f"code already holds {MAX_CODE_SIZE} bits")
        mask = 1 << self._length
        if bit:
            self._value |= mask
        else:
            self._value &= ~mask
        self._length += 1

    def pop_bit(self) -> int:
        """Remove the last bit and return it."""
        if self._length == 0:
            raise IndexError("pop from an empty code")
        self._length -= 1
        bit = (self._value >> self._length) & 1
        self._value &= (1 << self._length) - 1
        return bit

    def get_bit(self, index: int) -> int:
        """Return the bit at ``index``."""
        if not 0 <= index < self._length:
            raise IndexError(f"bit index {index} out of range")
        return (self._value >> index) & 1

    def is_full(self) -> bool:
        """Whether no more bits can be pushed."""
        return self._length == MAX_CODE_SIZE

    def copy(self) -> Code:
        """Return an independent copy of this code."""
        other = Code()
        other._value = self._value
        other._length = self._length
        return other

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        value = self._value
        for _ in range(self._length):
            yield value & 1
            value >>= 1

    def __str__(self) -> str:
        return "".join(str(bit) for bit in self)

    def __repr__(self) -> str:
        return f"Code({str(self)!r})"

    def _key(self) -> tuple[int, bytes]:
        return self._length, self._value.to_bytes(MAX_CODE_SIZE, "little")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return self._length == other._length and self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash((self._length, self._value))