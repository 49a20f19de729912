from symtab.base import OrderedSymbolTable
from symtab.errors import (
    AbsentKeyError,
    EmptyTableError,
    InvalidRankError,
    TooLargeCeilingKeyError,
    TooSmallFloorKeyError,
)


class BinarySearchST(OrderedSymbolTable):
    """
    Ordered symbol table backed by a pair of parallel lists kept in key
    order. Lookups and the order statistics are binary searches (O(log n)),
    select(), min() and max() are O(1), but put() and delete() shift the
    entries after the updated position and so are O(n).
    """

    def __init__(self, compare=None):
        super().__init__(compare)
        self._keys = []
        self._values = []

    def size(self):
        return len(self._keys)

    def clear(self):
        self._keys.clear()
        self._values.clear()

    def _rank(self, key):
        """
        Return the position of the key if it is present, otherwise the
        position where it would be inserted, and whether it is present.
        """
        lo = 0
        hi = len(self._keys) - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            cmp = self.compare(key, self._keys[mid])
            if cmp < 0:
                hi = mid - 1
            elif cmp > 0:
                lo = mid + 1
            else:
                return mid, True
        return lo, False

    def rank(self, key):
        i, found = self._rank(key)
        if not found:
            raise AbsentKeyError(key)
        return i

    def get(self, key):
        i, found = self._rank(key)
        if not found:
            raise AbsentKeyError(key)
        return self._values[i]

    def contains(self, key):
        return self._rank(key)[1]

    def put(self, key, value):
        i, found = self._rank(key)
        if found:
            self._values[i] = value
        else:
            self._keys.insert(i, key)
            self._values.insert(i, value)

    def delete(self, key):
        i, found = self._rank(key)
        if not found:
            raise AbsentKeyError(key)
        del self._keys[i]
        del self._values[i]

    def delete_min(self):
        if not self._keys:
            raise EmptyTableError()
        del self._keys[0]
        del self._values[0]

    def delete_max(self):
        if not self._keys:
            raise EmptyTableError()
        del self._keys[-1]
        del self._values[-1]

    def min(self):
        if not self._keys:
            raise EmptyTableError()
        return self._keys[0]

    def max(self):
        if not self._keys:
            raise EmptyTableError()
        return self._keys[-1]

    def select(self, k):
        if k < 0 or k >= len(self._keys):
            raise InvalidRankError(k)
        return self._keys[k]

    def floor(self, key):
        i, found = self._rank(key)
        if found:
            return self._keys[i]
        if i == 0:
            raise TooSmallFloorKeyError(key)
        return self._keys[i - 1]

    def ceiling(self, key):
        i, found = self._rank(key)
        if i == len(self._keys):
            raise TooLargeCeilingKeyError(key)
        return self._keys[i]

    def range_size(self, lo, hi):
        if self.compare(lo, hi) > 0:
            return 0
        hi_rank, found = self._rank(hi)
        lo_rank, _ = self._rank(lo)
        return hi_rank - lo_rank + (1 if found else 0)

    def iterator(self):
        for i in range(len(self._keys)):
            yield (self._keys[i], self._values[i])

    def range_iterator(self, lo, hi):
        if self.compare(lo, hi) > 0:
            return
        hi_rank, found = self._rank(hi)
        if found:
            hi_rank += 1
        lo_rank, _ = self._rank(lo)
        for i in range(lo_rank, hi_rank):
            yield (self._keys[i], self._values[i])
