"""First-fit block allocator over a simulated word-addressed heap.

Every block carries a 32-bit header and a matching footer that hold the
block size in bytes. Bit 0 is set while the block is allocated. A freed block
is marked free but is not merged with its neighbours.
"""

from __future__ import annotations

__all__ = ["Arena"]

_WORD = 4
_MASK32 = 0xFFFFFFFF
_ALLOCATED_BIT = 1
_SIZE_MASK = 0xFFFFFFFE


def _align_up(address: int) -> int:
    """Round to the next word boundary, always moving forward by at least one byte."""
    return ((address >> 2) + 1) << 2


class Arena:
    """A heap of ``size`` bytes starting after the address ``start``."""

    def __init__(self, start: int, size: int) -> None:
        if start < 0 or size < _WORD:
            raise ValueError("arena needs a non-negative start and at least one word")
        self.start = _align_up(start)
        self.end = self.start + _align_up(size)
        self._memory: dict[int, int] = {}
        self._released = False
        first = ((size - _WORD) & _SIZE_MASK) & _MASK32
        self._memory[self.start] = first
        self._memory[self.end] = first

    def header(self, address: int) -> int:
        """Return the raw 32-bit word stored at ``address`` (0 if never written)."""
        return self._memory.get(address, 0)

    def _write(self, address: int, value: int) -> None:
        self._memory[address] = value & _MASK32

    def malloc(self, size: int) -> int:
        """Allocate ``size`` bytes with a first-fit search; return the block address."""
        if self._released:
            raise RuntimeError("arena has been released")
        if size < 0:
            raise ValueError("allocation size must not be negative")
        words = (size + 3) >> 2
        byte_size = words << 2

        cursor = self.start
        while cursor < self.end:
            word = self.header(cursor)
            if word & _ALLOCATED_BIT or (word != 0 and word < byte_size):
                cursor += ((word >> 2) + 2) * _WORD
                continue
            break
        else:
            raise MemoryError(f"no free block of {size} bytes")

        footer = cursor + (words + 1) * _WORD
        if footer > self.end:
            raise MemoryError(f"no free block of {size} bytes")

        old_size = self.header(cursor) & _SIZE_MASK
        self._write(cursor, (byte_size & _SIZE_MASK) | _ALLOCATED_BIT)
        self._write(footer, self.header(cursor))
        if old_size > byte_size + 2 * _WORD:
            self._write(footer + _WORD, (old_size - (byte_size + 2 * _WORD)) & _SIZE_MASK)
        return cursor + _WORD

    def free(self, ptr: int) -> None:
        """Mark the block at ``ptr`` free; blocks not allocated are left alone."""
        head = ptr - _WORD
        word = self.header(head)
        if not word & _ALLOCATED_BIT:
            return
        size = word & _SIZE_MASK
        self._write(head, size)
        footer = head + ((size >> 2) + 1) * _WORD
        self._write(footer, self.header(footer) & _SIZE_MASK)

    def release(self) -> None:
        """Forget the heap; later allocations raise RuntimeError."""
        self.start = 0
        self.end = 0
        self._memory.clear()
        self._released = True