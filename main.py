import logging

from pairheap import BinaryHeap, get_topk

logging.basicConfig(level=logging.DEBUG)

elements = [10, 20, 30, 40]
priorities = [5, 3, 8, 1]

# Create an empty heap and fill it pair by pair
print("Creating binary heap...")
heap = BinaryHeap(capacity=8)
for element, priority in zip(elements, priorities):
    heap.insert(element, priority)

# Test basic properties
print(f"Heap size: {len(heap)}")
print(f"Capacity: {heap.capacity}")
print(f"Is empty: {heap.is_empty()}")
print(f"Min element: {heap.peek_min()}")
print(f"Min priority: {heap.peek_min_priority()}")
heap.dump()

# Bulk construction and merge
other = BinaryHeap.from_arrays([7, 2, 9], [70, 80, 90], spare_capacity=2)
merged = BinaryHeap.merge(heap, other)
print(f"Merged: {merged!r}")
print(f"Top-3 of merged heap: {get_topk(merged, 3)}")

print("Draining...")
while not heap.is_empty():
    print(f"Extracted: {heap.extract_min()}")
