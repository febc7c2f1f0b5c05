from pairheap.binary_heap.binary_heap import DEFAULT_CAPACITY, BinaryHeap
from pairheap.binary_heap.topk import get_topk
from pairheap.exceptions import (
    CapacityExceededError,
    EmptyHeapError,
    HeapError,
    InvalidArgumentError,
)
