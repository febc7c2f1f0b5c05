from pairheap.binary_heap.binary_heap import BinaryHeap
from pairheap.binary_heap.topk import get_topk


class TestGetTopK:
    def test_get_topk_with_negative_k(self):
        heap = BinaryHeap.from_arrays([10, 5, 3], [1, 2, 3])
        result = get_topk(heap, -1)
        assert result == []

    def test_get_topk_with_empty_heap(self):
        heap = BinaryHeap()
        result = get_topk(heap, 5)
        assert result == []

    def test_get_topk(self):
        heap = BinaryHeap.from_arrays(
            [10, 5, 15, 1, 20],
            [100, 50, 150, 10, 200]
        )
        result = get_topk(heap, 3)
        expected = [10, 50, 100]
        assert result == expected

    def test_get_topk_does_not_mutate_heap(self):
        heap = BinaryHeap.from_arrays([4, 2, 8], [40, 20, 80], spare_capacity=1)
        before = heap.items()
        get_topk(heap, 2)
        assert heap.items() == before
        assert len(heap) == 3
        assert heap.capacity == 4

    def test_get_topk_k_larger_than_heap(self):
        heap = BinaryHeap.from_arrays([3, 1, 2], [30, 10, 20])
        result = get_topk(heap, 10)
        assert result == [10, 20, 30]

    def test_get_topk_with_duplicate_priorities(self):
        heap = BinaryHeap.from_arrays(
            [10, 10, 5, 15],
            [1, 2, 3, 4]
        )
        result = get_topk(heap, 3)
        assert len(result) == 3
        assert result[0] == 3
        # both priority 10
        assert 1 in result
        assert 2 in result
        assert 4 not in result

    def test_get_topk_with_negative_priorities(self):
        heap = BinaryHeap.from_arrays([-10, 0, 5, -5], [1, 2, 3, 4])
        result = get_topk(heap, 2)
        expected = [1, 4]
        assert result == expected
