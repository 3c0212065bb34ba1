class SymmetricPairTable:
    """
    Two-dimensional table keyed by an unordered pair of small indices.

    Only the lower triangle (i >= j) is stored, so table[i, j] and table[j, i]
    resolve to the same cell and a write through one ordering is visible
    through the other. The size is fixed at construction.
    """

    def __init__(self, size, new_element):
        """
        Args:
            size: Number of valid indices per axis, indices are 0..size-1
            new_element: Called once per unordered pair as new_element(i, j) with i >= j
        """
        self.size = size
        self.rows = [[new_element(i, j) for j in range(i + 1)] for i in range(size)]

    def _locate(self, key):
        i, j = key
        if not (0 <= i < self.size and 0 <= j < self.size):
            raise IndexError(f"index {key} out of range for SymmetricPairTable of size {self.size}")
        return max(i, j), min(i, j)

    def __getitem__(self, key):
        row, col = self._locate(key)
        return self.rows[row][col]

    def __setitem__(self, key, value):
        row, col = self._locate(key)
        self.rows[row][col] = value

    def __len__(self):
        return self.size

    def cells(self):
        """Yield ((i, j), value) for every stored cell, i >= j."""
        for i, row in enumerate(self.rows):
            for j, value in enumerate(row):
                yield (i, j), value

    def to_list(self):
        return [list(row) for row in self.rows]

    def __repr__(self):
        return f"SymmetricPairTable({self.rows!r})"
