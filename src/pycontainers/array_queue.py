import logging
import numpy as np

logger = logging.getLogger(__name__)

class ArrayQueue:
    """ FIFO queue over a circular buffer.

    Doubles in capacity when a push finds no free slot.
    Halves in capacity (never below MIN_CAPACITY) when a pop leaves less than a quarter of the
    capacity occupied.

    Notes:
        start and end index the oldest and newest items; both are set to -1 when the queue is empty.
    """
    MIN_CAPACITY = 10
    INITIAL_CAPACITY = 10

    class InvariantViolationException (RuntimeError):
        def __init__(self, queue) -> None:
            super().__init__(f"Invariant violation: no free slot around start={queue.start}, " +
                    f"end={queue.end} with capacity {queue.capacity()}.")

    def __init__(self) -> None:
        self.storage = np.empty(self.INITIAL_CAPACITY, dtype=object)
        self.start = -1
        self.end = -1

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.start != -1

    def __iter__(self) -> any:
        # Iterates over a snapshot in FIFO order
        return iter(self.get_array())

    def __str__(self) -> str:
        return self.get_array().__str__()

    def capacity(self) -> int:
        return self.storage.shape[0]

    def size(self) -> int:
        if self.start == -1:
            return 0

        if self.start < self.end:
            return self.end - self.start + 1

        if self.start == self.end:
            return 1

        return (self.capacity() - self.start) + self.end + 1 # Wrapped

    def peek_left(self) -> any:
        # Next item to be dequeued
        return None if self.start == -1 else self.storage[self.start]

    def peek_right(self) -> any:
        # Most recently enqueued item
        return None if self.start == -1 else self.storage[self.end]

    def pop_left(self) -> any:
        """ Dequeues the least recently enqueued item.

        returns:
            item (any): The dequeued item, None if the queue is empty.
        """
        if self.start == -1:
            return None

        item = self.storage[self.start]
        self.storage[self.start] = None

        if self.start == self.end: # Last item
            self.start = -1
            self.end = -1
        elif self.start == self.capacity() - 1:
            self.start = 0
        else:
            self.start += 1

        if self.capacity() > self.MIN_CAPACITY and self.capacity() > self.size() * 4:
            self.resize(grow=False)

        return item

    def push_right(self, item: any) -> int:
        """ Enqueues the item.

        returns:
            size (int): The number of enqueued items.
        """
        if self.start == -1:
            self.storage[0] = item
            self.start = 0
            self.end = 0
            return self.size()

        if self.start < self.end:
            if self.end + 1 < self.capacity():
                self.end += 1
            elif self.start > 0: # Wrap around
                self.end = 0
            else:
                self.resize(grow=True)
                return self.push_right(item)

        elif self.start > self.end:
            if self.start - self.end <= 1: # No gap between end and start
                self.resize(grow=True)
                return self.push_right(item)

            self.end += 1

        else:
            # Single item: fill the slot after end, otherwise wrap to the front
            if self.end + 1 < self.capacity():
                self.end += 1
            elif self.start > 0:
                self.end = 0
            else:
                raise ArrayQueue.InvariantViolationException(self)

        self.storage[self.end] = item
        return self.size()

    def get_array(self) -> np.ndarray:
        # Returns the items in FIFO order
        if self.start == -1:
            return np.empty(0, dtype=object)

        if self.start <= self.end:
            return self.storage[self.start:self.end + 1].copy()

        return np.concatenate([self.storage[self.start:], self.storage[:self.end + 1]], axis=0)

    def resize(self, grow: bool = True) -> int:
        """ Reallocates the storage, packing the items in FIFO order from index 0.

        params:
            grow (bool, opt): Doubles the capacity if set, otherwise halves the capacity down to
                    MIN_CAPACITY.
        """
        capacity = self.capacity() * 2 if grow else max(self.MIN_CAPACITY, self.capacity() // 2)
        items = self.get_array()
        logger.debug("ArrayQueue resized from %d to %d slots holding %d items", self.capacity(),
                capacity, items.shape[0])

        self.storage = np.empty(capacity, dtype=object)
        self.storage[:items.shape[0]] = items

        if items.shape[0]:
            self.start = 0
            self.end = items.shape[0] - 1
        else:
            self.start = -1
            self.end = -1

        return self.size()

if __name__ == "__main__":
    pass
