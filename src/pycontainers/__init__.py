from pycontainers.array_queue import ArrayQueue
from pycontainers.comparators import key_comparator, max_comparator, min_comparator
from pycontainers.heap import Heap, KeyValueHeap, KeyValuePair
