"""Linear stack allocator: allocates forward, frees only as a whole."""

from __future__ import annotations

__all__ = ["LinearStack"]


def _advance(size: int) -> int:
    """Bytes taken by an allocation of ``size``: the next word multiple above it."""
    return ((size >> 2) + 1) << 2


class LinearStack:
    """A bump allocator over an address range, with one saved position."""

    def __init__(self, start: int, size: int) -> None:
        if start < 0 or size < 0:
            raise ValueError("start and size must not be negative")
        self.start = ((start >> 2) + 1) << 2
        self.end = self.start + _advance(size)
        self.size = size
        self.tail = self.start
        self._saved = self.start

    def alloc(self, size: int) -> int:
        """Reserve ``size`` bytes and return their address."""
        if size < 0:
            raise ValueError("allocation size must not be negative")
        new_tail = self.tail + _advance(size)
        if new_tail > self.end:
            raise MemoryError(f"linear stack cannot fit {size} more bytes")
        current = self.tail
        self.tail = new_tail
        return current

    def free_all(self) -> None:
        """Release every allocation and reset the saved position."""
        self.tail = self.start
        self._saved = self.start

    def free_bytes(self) -> int:
        """Bytes left between the tail and the end of the area."""
        return self.end - self.tail

    def save_position(self) -> None:
        """Remember the current tail."""
        self._saved = self.tail

    def restore_position(self) -> None:
        """Return the tail to the last saved position."""
        self.tail = self._saved