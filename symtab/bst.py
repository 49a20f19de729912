from symtab.base import OrderedSymbolTable
from symtab.errors import (
    AbsentKeyError,
    EmptyTableError,
    InvalidRankError,
    TooLargeCeilingKeyError,
    TooSmallFloorKeyError,
)


class _BSTNode:
    __slots__ = ['key', 'value', 'left', 'right', 'len']

    def __init__(self, key, value):
        self.key = key
        self.value = value
        self.left = None
        self.right = None
        self.len = 1


def _len(x):
    return x.len if x is not None else 0


class BST(OrderedSymbolTable):
    """
    Ordered symbol table backed by an unbalanced binary search tree. The
    operations take time proportional to the height of the tree, which is
    O(log n) for keys inserted in random order but O(n) in the worst case
    (e.g., keys inserted in sorted order).
    """

    def __init__(self, compare=None):
        super().__init__(compare)
        self._root = None

    def size(self):
        return _len(self._root)

    def clear(self):
        self._root = None

    def _search(self, key):
        x = self._root
        while x is not None:
            cmp = self.compare(key, x.key)
            if cmp < 0:
                x = x.left
            elif cmp > 0:
                x = x.right
            else:
                break
        return x

    def get(self, key):
        x = self._search(key)
        if x is None:
            raise AbsentKeyError(key)
        return x.value

    def contains(self, key):
        return self._search(key) is not None

    def put(self, key, value):
        self._root = self._put(self._root, key, value)

    def _put(self, x, key, value):
        if x is None:
            return _BSTNode(key, value)
        cmp = self.compare(key, x.key)
        if cmp < 0:
            x.left = self._put(x.left, key, value)
        elif cmp > 0:
            x.right = self._put(x.right, key, value)
        else:
            x.value = value
        x.len = 1 + _len(x.left) + _len(x.right)
        return x

    def delete_min(self):
        if self._root is None:
            raise EmptyTableError()
        self._root = self._delete_min(self._root)

    def _delete_min(self, x):
        if x.left is None:
            return x.right
        x.left = self._delete_min(x.left)
        x.len = 1 + _len(x.left) + _len(x.right)
        return x

    def delete_max(self):
        if self._root is None:
            raise EmptyTableError()
        self._root = self._delete_max(self._root)

    def _delete_max(self, x):
        if x.right is None:
            return x.left
        x.right = self._delete_max(x.right)
        x.len = 1 + _len(x.left) + _len(x.right)
        return x

    def delete(self, key):
        if self._search(key) is None:
            raise AbsentKeyError(key)
        self._root = self._delete(self._root, key)

    def _delete(self, x, key):
        cmp = self.compare(key, x.key)
        if cmp < 0:
            x.left = self._delete(x.left, key)
        elif cmp > 0:
            x.right = self._delete(x.right, key)
        else:
            if x.right is None:
                return x.left
            if x.left is None:
                return x.right
            # Replace the node with its successor.
            t = x
            x = self._minimum(t.right)
            x.right = self._delete_min(t.right)
            x.left = t.left
        x.len = 1 + _len(x.left) + _len(x.right)
        return x

    def _minimum(self, x):
        while x.left is not None:
            x = x.left
        return x

    def _maximum(self, x):
        while x.right is not None:
            x = x.right
        return x

    def min(self):
        if self._root is None:
            raise EmptyTableError()
        return self._minimum(self._root).key

    def max(self):
        if self._root is None:
            raise EmptyTableError()
        return self._maximum(self._root).key

    def floor(self, key):
        x = self._floor(self._root, key)
        if x is None:
            raise TooSmallFloorKeyError(key)
        return x.key

    def _floor(self, x, key):
        if x is None:
            return None
        cmp = self.compare(key, x.key)
        if cmp == 0:
            return x
        if cmp < 0:
            return self._floor(x.left, key)
        t = self._floor(x.right, key)
        return t if t is not None else x

    def ceiling(self, key):
        x = self._ceiling(self._root, key)
        if x is None:
            raise TooLargeCeilingKeyError(key)
        return x.key

    def _ceiling(self, x, key):
        if x is None:
            return None
        cmp = self.compare(key, x.key)
        if cmp == 0:
            return x
        if cmp > 0:
            return self._ceiling(x.right, key)
        t = self._ceiling(x.left, key)
        return t if t is not None else x

    def select(self, k):
        if k < 0 or k >= self.size():
            raise InvalidRankError(k)
        x = self._root
        while True:
            left_len = _len(x.left)
            if k < left_len:
                x = x.left
            elif k > left_len:
                k -= left_len + 1
                x = x.right
            else:
                return x.key

    def _rank(self, x, key):
        if x is None:
            return 0, False
        cmp = self.compare(key, x.key)
        if cmp < 0:
            return self._rank(x.left, key)
        elif cmp > 0:
            i, found = self._rank(x.right, key)
            return 1 + _len(x.left) + i, found
        else:
            return _len(x.left), True

    def rank(self, key):
        i, found = self._rank(self._root, key)
        if not found:
            raise AbsentKeyError(key)
        return i

    def range_size(self, lo, hi):
        if self.compare(lo, hi) > 0:
            return 0
        hi_rank, found = self._rank(self._root, hi)
        lo_rank, _ = self._rank(self._root, lo)
        return hi_rank - lo_rank + (1 if found else 0)

    def _traverse(self, x, lo, hi):
        if x is None:
            return
        cmp_lo = self.compare(lo, x.key)
        cmp_hi = self.compare(hi, x.key)
        if cmp_lo < 0:
            yield from self._traverse(x.left, lo, hi)
        if cmp_lo <= 0 and cmp_hi >= 0:
            yield (x.key, x.value)
        if cmp_hi > 0:
            yield from self._traverse(x.right, lo, hi)

    def iterator(self):
        # Iterative, since the tree may be as deep as it is long.
        stack = []
        x = self._root
        while stack or x is not None:
            while x is not None:
                stack.append(x)
                x = x.left
            x = stack.pop()
            yield (x.key, x.value)
            x = x.right

    def range_iterator(self, lo, hi):
        if self.compare(lo, hi) > 0:
            return
        yield from self._traverse(self._root, lo, hi)
