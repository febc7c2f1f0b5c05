from pairheap.binary_heap.binary_heap import DEFAULT_CAPACITY, BinaryHeap
