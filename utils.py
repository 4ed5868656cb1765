def is_less(a, b) -> bool:
    """Min-heap ordering: `a` goes above `b` when it is smaller."""
    return a < b

def is_greater(a, b) -> bool:
    """Max-heap ordering: `a` goes above `b` when it is larger."""
    return a > b

def by_key(key, comparator=is_less):
    """Build an ordering predicate that compares `key(a)` with `key(b)`."""
    def compare(a, b) -> bool:
        return comparator(key(a), key(b))
    compare.__name__ = f"by_key_{getattr(comparator, '__name__', 'comparator')}"
    return compare

def is_valid_heap(heap) -> bool:
    """Check that no child in the heap outranks its parent."""
    items = heap.items
    if items.length() != heap.length() + 1:
        return False
    for i in range(2, heap.length() + 1):
        if heap.comparator(items.get(i), items.get(i // 2)):
            return False
    return True
