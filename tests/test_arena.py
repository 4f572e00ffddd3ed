import pytest
from hypothesis import given, strategies as st

from fixengine.arena import Arena


def test_initial_header_matches_footer():
    arena = Arena(0, 64)
    assert arena.header(arena.start) == arena.header(arena.end)
    assert arena.header(arena.start) & 1 == 0


def test_start_is_word_aligned_past_given_start():
    arena = Arena(3, 64)
    assert arena.start % 4 == 0
    assert arena.start > 3


def test_malloc_marks_block_allocated():
    arena = Arena(0, 64)
    ptr = arena.malloc(8)
    assert ptr == arena.start + 4
    head = arena.header(ptr - 4)
    assert head & 1 == 1
    assert head & ~1 >= 8


def test_allocations_do_not_overlap():
    arena = Arena(0, 128)
    first = arena.malloc(8)
    second = arena.malloc(8)
    assert second >= first + 8
    assert second % 4 == 0


def test_free_clears_allocated_bit():
    arena = Arena(0, 64)
    ptr = arena.malloc(8)
    arena.free(ptr)
    assert arena.header(ptr - 4) & 1 == 0


def test_freed_block_is_reused_first_fit():
    arena = Arena(0, 128)
    first = arena.malloc(8)
    arena.malloc(8)
    arena.free(first)
    assert arena.malloc(8) == first


def test_freed_block_too_small_is_skipped():
    arena = Arena(0, 128)
    first = arena.malloc(8)
    arena.malloc(8)
    arena.free(first)
    assert arena.malloc(12) != first


def test_double_free_is_harmless():
    arena = Arena(0, 64)
    ptr = arena.malloc(8)
    arena.free(ptr)
    before = arena.header(ptr - 4)
    arena.free(ptr)
    assert arena.header(ptr - 4) == before


def test_too_large_allocation_raises():
    arena = Arena(0, 64)
    with pytest.raises(MemoryError):
        arena.malloc(1000)


def test_release_prevents_allocation():
    arena = Arena(0, 64)
    arena.release()
    assert arena.start == 0
    with pytest.raises(RuntimeError):
        arena.malloc(4)


def test_negative_size_rejected():
    arena = Arena(0, 64)
    with pytest.raises(ValueError):
        arena.malloc(-1)


@given(st.lists(st.integers(min_value=1, max_value=64), min_size=1, max_size=40))
def test_sequential_blocks_are_disjoint(sizes):
    arena = Arena(0, 4096)
    blocks = []
    for size in sizes:
        try:
            ptr = arena.malloc(size)
        except MemoryError:
            break
        blocks.append((ptr, ptr + size))
    assert blocks
    ordered = sorted(blocks)
    for (_, end), (start, _) in zip(ordered, ordered[1:]):
        assert end <= start
    assert all(start % 4 == 0 and end <= arena.end for start, end in blocks)