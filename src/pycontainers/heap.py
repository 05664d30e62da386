import logging

from collections import namedtuple
from collections.abc import Iterable

logger = logging.getLogger(__name__)

class Heap:
    """ Array-backed binary heap ordered by an injected three-way comparator.

    The comparator follows the semantics of standard sorting predicates:
        comparator(a, b) < 0    a has a higher priority than b.
        comparator(a, b) > 0    b has a higher priority than a.
        comparator(a, b) == 0   a and b share the same priority.

    The highest priority item sits at the head of the heap. When max_capacity is set, every
    push beyond the capacity pops and returns the head, so that a heap built with an ascending
    comparator keeps the max_capacity largest items pushed so far.

    params:
        comparator (callable): The three-way comparator.
        max_capacity (int, opt): The maximum number of items held. Unbounded if not specified.
    """
    def __init__(self, comparator: callable, max_capacity: int = None) -> None:
        if max_capacity is not None and max_capacity < 1:
            raise ValueError(f"max_capacity must be a positive integer, got {max_capacity}.")

        self.comparator = comparator
        self.max_capacity = max_capacity
        self._storage = []

    @classmethod
    def heapify(cls, items: Iterable, comparator: callable, max_capacity: int = None):
        """ Builds a heap from the items in linear time.

        params:
            items (Iterable): The items to place in the heap.
            comparator (callable): The three-way comparator.
            max_capacity (int, opt): The maximum number of items held. The surplus head items are
                    evicted when there are more items than the capacity.

        returns:
            heap (Heap): The heap containing the items.
        """
        heap = cls(comparator, max_capacity)
        heap._storage = list(items)

        for pos in reversed(range(len(heap._storage) // 2)):
            heap._percolate_down(pos)

        while heap.max_capacity is not None and len(heap._storage) > heap.max_capacity:
            heap._evict()

        return heap

    @property
    def storage(self) -> tuple:
        # Snapshot of the tree layout
        return tuple(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def __bool__(self) -> bool:
        return len(self._storage) > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._storage)}, max_capacity={self.max_capacity})"

    def size(self) -> int:
        return len(self._storage)

    def push(self, item: any) -> any:
        """ Adds an item to the heap.

        If the heap grows past its maximum capacity, the head item (as determined by the comparator)
        is popped and returned. This may be the item that was just pushed.

        returns:
            evicted_item (any): The evicted item, None if no item was evicted.
        """
        self._storage.append(item)
        self._percolate_up(len(self._storage) - 1)

        if self.max_capacity is not None and len(self._storage) > self.max_capacity:
            return self._evict()

        return None

    def pop(self) -> any:
        if not self._storage:
            return None

        if len(self._storage) == 1:
            return self._storage.pop()

        head = self._storage[0]
        self._storage[0] = self._storage.pop() # Overwrite the head with the end item
        self._percolate_down(0)

        return head

    def peek(self) -> any:
        # Mutating the returned item does not rebalance the heap
        return self._storage[0] if self._storage else None

    def is_valid(self) -> bool:
        # Checks the heap invariant across every parent-child pair
        return all(
            self._in_order((pos - 1) // 2, pos) for pos in range(1, len(self._storage))
        )

    def _evict(self) -> any:
        evicted_item = self.pop()
        logger.debug("%r evicted %r", self, evicted_item)

        return evicted_item

    def _in_order(self, parent_pos: int, child_pos: int) -> bool:
        return self.comparator(self._storage[parent_pos], self._storage[child_pos]) <= 0

    def _percolate_up(self, pos: int) -> None:
        while pos > 0:
            parent_pos = (pos - 1) // 2

            if self._in_order(parent_pos, pos):
                break

            self._storage[parent_pos], self._storage[pos] = self._storage[pos], self._storage[parent_pos]
            pos = parent_pos

    def _percolate_down(self, pos: int) -> None:
        child_pos = self._highest_priority_child(pos)

        while child_pos is not None and not self._in_order(pos, child_pos):
            self._storage[pos], self._storage[child_pos] = self._storage[child_pos], self._storage[pos]
            pos = child_pos
            child_pos = self._highest_priority_child(pos)

    def _highest_priority_child(self, parent_pos: int) -> int:
        end_pos = len(self._storage)
        left_pos = 2 * parent_pos + 1
        right_pos = left_pos + 1

        if left_pos >= end_pos: # No children
            return None

        if right_pos >= end_pos or self._in_order(left_pos, right_pos): # Left wins ties
            return left_pos

        return right_pos

KeyValuePair = namedtuple("KeyValuePair", ["key", "value"])

class KeyValueHeap (Heap):
    """ Heap of (key, value) pairs ordered by the value.

    The comparator receives the sort values rather than the pairs.
    """
    def __init__(self, comparator: callable, max_capacity: int = None) -> None:
        super().__init__(self._pair_comparator(comparator), max_capacity)
        self.value_comparator = comparator

    @staticmethod
    def _pair_comparator(comparator: callable) -> callable:
        def pair_comparator(base: KeyValuePair, other: KeyValuePair) -> int:
            return comparator(base.value, other.value)

        return pair_comparator

    @classmethod
    def heapify(cls, items: Iterable, comparator: callable, max_capacity: int = None):
        return super().heapify(
            (KeyValuePair(key, value) for key, value in items), comparator, max_capacity
        )

    def push(self, key: any, value: any) -> KeyValuePair:
        return super().push(KeyValuePair(key, value))

if __name__ == "__main__":
    pass
