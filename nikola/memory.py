"""Byte-block allocation with bookkeeping of allocations and frees."""

from __future__ import annotations

from typing import Optional

from nikola.logger import check

__all__ = ["MemoryTracker", "memory_set", "memory_zero", "memory_copy"]


class MemoryTracker:
    """Hands out byte blocks and counts allocations, frees and bytes."""

    def __init__(self) -> None:
        self._alloc_count = 0
        self._free_count = 0
        self._alloc_total_bytes = 0

    def allocate(self, size: int) -> bytearray:
        """Return a new block of ``size`` bytes."""
        check(size >= 0, "size >= 0", "Could not allocate any more memory!")
        block = bytearray(size)
        self._alloc_count += 1
        self._alloc_total_bytes += size
        return block

    def reallocate(self, block: Optional[bytearray], new_size: int) -> bytearray:
        """Return a block of ``new_size`` bytes holding the start of ``block``."""
        check(block is not None, "ptr", "Could not allocate any more memory!")
        check(new_size >= 0, "new_size >= 0", "Could not allocate any more memory!")
        resized = bytearray(new_size)
        kept = min(new_size, len(block))
        resized[:kept] = block[:kept]
        self._alloc_count += 1
        self._alloc_total_bytes += new_size
        return resized

    def blocks_allocate(self, count: int, block_size: int) -> bytearray:
        """Return a zeroed block of ``count * block_size`` bytes."""
        check(count >= 0 and block_size >= 0, "count, block_size", "Could not allocate any more memory!")
        return self._record(bytearray(count * block_size))

    def _record(self, block: bytearray) -> bytearray:
        self._alloc_count += 1
        self._alloc_total_bytes += len(block)
        return block

    def free(self, block: Optional[bytearray]) -> None:
        """Release ``block`` and count the free."""
        check(block is not None, "ptr", "Cannot free an invalid pointer!")
        self._alloc_count -= 1
        self._free_count += 1

    def allocations_count(self) -> int:
        """Number of allocations made, freed or not."""
        return self._free_count + self._alloc_count

    def frees_count(self) -> int:
        return self._free_count

    def allocation_bytes(self) -> int:
        """Total bytes ever requested."""
        return self._alloc_total_bytes


def memory_set(block: Optional[bytearray], value: int, size: int) -> bytearray:
    """Fill the first ``size`` bytes of ``block`` with the low byte of ``value``."""
    check(block is not None, "ptr", "Cannot set values of invalid pointer")
    check(0 <= size <= len(block), "size <= len(ptr)", "Cannot set values past the end of a block")
    block[:size] = bytes([value & 0xFF]) * size
    return block


def memory_zero(block: Optional[bytearray], size: int) -> bytearray:
    """Zero the first ``size`` bytes of ``block``."""
    return memory_set(block, 0, size)


def memory_copy(dest: Optional[bytearray], src: Optional[bytes], size: int) -> bytearray:
    """Copy the first ``size`` bytes of ``src`` into ``dest``."""
    check(dest is not None and src is not None, "dest && src", "Cannot copy around invalid memory blocks!")
    check(
        0 <= size <= len(dest) and size <= len(src),
        "size <= len(dest) && size <= len(src)",
        "Cannot copy around invalid memory blocks!",
    )
    dest[:size] = src[:size]
    return dest