class Array:
    def __init__(self, size):
        if size < 1:
            raise ValueError(f"Array size must be positive, got {size}")
        self.initial_size = size
        self.size = size
        self.index = 0
        self.elements = [None] * size

    def _resize(self):
        self.size *= 2
        self.elements.extend([None] * (self.size - len(self.elements)))

    def _shrink(self):
        # Halve while at most a quarter full, keeping the initial capacity
        while self.size // 2 >= self.initial_size and self.index <= self.size // 4:
            self.size //= 2
        del self.elements[self.size:]

    def insert(self, data):
        if self.index >= self.size:
            self._resize()
        self.elements[self.index] = data
        self.index += 1

    def get(self, i):
        if i < 0 or i >= self.index:
            return None
        return self.elements[i]

    def set(self, i, data):
        if i < 0 or i >= self.index:
            raise IndexError(f"Array index {i} out of range (length {self.index})")
        self.elements[i] = data

    def swap(self, i, j):
        if not (0 <= i < self.index and 0 <= j < self.index):
            raise IndexError(f"Array swap ({i}, {j}) out of range (length {self.index})")
        self.elements[i], self.elements[j] = self.elements[j], self.elements[i]

    def pop(self):
        """Removes and returns the last element, or None if the array is empty."""
        if self.index == 0:
            return None
        self.index -= 1
        data = self.elements[self.index]
        self.elements[self.index] = None
        if self.index <= self.size // 4:
            self._shrink()
        return data

    def length(self):
        return self.index

    def delete_all(self):
        self.elements = [None] * self.initial_size
        self.size = self.initial_size
        self.index = 0

    def __iter__(self):
        for i in range(self.index):
            yield self.elements[i]
