from pairheap.binary_heap.binary_heap import BinaryHeap


def get_topk(heap: BinaryHeap, k: int) -> list[int]:
    """
    Function to get the top-K elements from a heap.

    The K elements with the lowest priority are retrieved in non-decreasing
    priority order. The heap itself is left untouched: a private copy is
    built with `BinaryHeap.merge` and drained instead.

    Parameters
    ----------
    heap : BinaryHeap
        A BinaryHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[int]
        The 'top-K' elements.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    copy = BinaryHeap.merge(heap, BinaryHeap(0))
    return [copy.extract_min() for _ in range(min(k, len(copy)))]
