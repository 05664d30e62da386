import pytest

from pycontainers import ArrayQueue, Heap, max_comparator, min_comparator


@pytest.fixture
def min_heap():
    return Heap(min_comparator)


@pytest.fixture
def max_heap():
    return Heap(max_comparator)


@pytest.fixture
def queue():
    return ArrayQueue()


@pytest.fixture
def assert_heap_invariant():
    """Checks that no parent has a lower priority than its children"""
    def check(heap):
        storage = heap.storage
        for pos in range(1, len(storage)):
            parent = storage[(pos - 1) // 2]
            assert heap.comparator(parent, storage[pos]) <= 0, \
                f"parent {parent!r} ranks below child {storage[pos]!r} at {pos}"
        assert heap.is_valid()
    return check


@pytest.fixture
def assert_capacity_discipline():
    """Checks the queue capacity bounds that hold after every pop"""
    def check(queue):
        assert queue.capacity() >= ArrayQueue.MIN_CAPACITY
        assert queue.capacity() >= queue.size()
        if queue.capacity() > ArrayQueue.MIN_CAPACITY:
            assert queue.size() * 4 >= queue.capacity()
    return check


@pytest.fixture
def drain():
    """Pops every item off a heap in order"""
    def pop_all(heap):
        items = []
        while heap.size():
            items.append(heap.pop())
        return items
    return pop_all
