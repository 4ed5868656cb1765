from array_ import Array
from utils import is_less, is_greater


class Heap:
    """Binary heap where comparator(a, b) is True when a sits above b. Iterating pops best-first."""

    def __init__(self, comparator, initial_size=16):
        if not callable(comparator):
            raise TypeError(f"comparator must be callable, got {type(comparator).__name__}")
        self._comparator = comparator
        self.count = 0
        self.items = Array(initial_size)
        self.items.insert(None)

    @classmethod
    def new_min(cls):
        return cls(is_less)

    @classmethod
    def new_max(cls):
        return cls(is_greater)

    @property
    def comparator(self):
        return self._comparator

    def length(self):
        return self.count

    def __len__(self):
        return self.count

    def is_empty(self):
        return self.count == 0

    def add(self, value):
        self.items.insert(value)
        self.count += 1
        self._sift_up(self.count)

    def take_next(self):
        """Removes and returns the highest-priority element, or None if the heap is empty."""
        if self.count == 0:
            return None

        result = self.items.get(1)
        last = self.items.pop()
        self.count -= 1
        if self.count > 0:
            self.items.set(1, last)
            self._sift_down(1)

        return result

    def __iter__(self):
        return self

    def __next__(self):
        if self.is_empty():
            raise StopIteration
        return self.take_next()

    def __repr__(self):
        name = getattr(self._comparator, "__name__", repr(self._comparator))
        return f"Heap(comparator={name}, count={self.count})"

    def _parent_idx(self, idx):
        return idx // 2

    def _left_child_idx(self, idx):
        return idx * 2

    def _right_child_idx(self, idx):
        return idx * 2 + 1

    def _children_present(self, idx):
        return self._left_child_idx(idx) <= self.count

    def _preferred_child_idx(self, idx):
        # Left child wins ties: right is taken only when it strictly outranks left
        left = self._left_child_idx(idx)
        right = self._right_child_idx(idx)
        if right > self.count:
            return left
        if self._comparator(self.items.get(right), self.items.get(left)):
            return right
        return left

    # Helper function to maintain heap property from child to parent
    def _sift_up(self, idx):
        while idx > 1:
            parent = self._parent_idx(idx)
            if not self._comparator(self.items.get(idx), self.items.get(parent)):
                break
            self.items.swap(idx, parent)
            idx = parent

    # Helper function to maintain heap property from parent to child
    def _sift_down(self, idx):
        while self._children_present(idx):
            child = self._preferred_child_idx(idx)
            if self._comparator(self.items.get(idx), self.items.get(child)):
                break
            self.items.swap(idx, child)
            idx = child


class MinHeap:
    @staticmethod
    def new():
        return Heap(is_less)


class MaxHeap:
    @staticmethod
    def new():
        return Heap(is_greater)
