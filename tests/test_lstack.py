import pytest
from hypothesis import given, strategies as st

from fixengine.lstack import LinearStack


def test_first_allocation_is_at_start():
    stack = LinearStack(0, 100)
    assert stack.alloc(10) == stack.start
    assert stack.start % 4 == 0


def test_initial_free_bytes_cover_size():
    stack = LinearStack(0, 100)
    assert 100 < stack.free_bytes() <= 104


def test_allocations_advance_and_shrink_free_space():
    stack = LinearStack(0, 256)
    before = stack.free_bytes()
    first = stack.alloc(10)
    second = stack.alloc(3)
    assert second >= first + 10
    assert before - stack.free_bytes() == stack.tail - first


def test_free_all_restores_space():
    stack = LinearStack(0, 256)
    initial = stack.free_bytes()
    stack.alloc(40)
    stack.alloc(17)
    stack.free_all()
    assert stack.free_bytes() == initial
    assert stack.tail == stack.start


def test_save_and_restore_position():
    stack = LinearStack(0, 256)
    stack.alloc(8)
    stack.save_position()
    marker = stack.tail
    stack.alloc(32)
    stack.alloc(32)
    stack.restore_position()
    assert stack.tail == marker
    assert stack.alloc(1) == marker


def test_overflow_raises_and_keeps_tail():
    stack = LinearStack(0, 16)
    tail = stack.tail
    with pytest.raises(MemoryError):
        stack.alloc(100)
    assert stack.tail == tail


def test_negative_size_rejected():
    stack = LinearStack(0, 16)
    with pytest.raises(ValueError):
        stack.alloc(-4)


@given(st.lists(st.integers(min_value=0, max_value=50), max_size=30))
def test_addresses_are_aligned_and_increasing(sizes):
    stack = LinearStack(1, 4096)
    addresses = [stack.alloc(size) for size in sizes]
    assert all(addr % 4 == 0 for addr in addresses)
    for (addr, size), nxt in zip(zip(addresses, sizes), addresses[1:]):
        assert nxt > addr + size - 1
    assert stack.free_bytes() >= 0