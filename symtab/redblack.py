from symtab.base import OrderedSymbolTable
from symtab.errors import (
    AbsentKeyError,
    EmptyTableError,
    InvalidRankError,
    TooLargeCeilingKeyError,
    TooSmallFloorKeyError,
)


_CHECK_INVARIANTS = False


class _RBNode:
    __slots__ = ['key', 'value', 'color', 'left', 'right', 'len']

    def __init__(self, key, value, color):
        self.key = key
        self.value = value
        # Color of the link from the parent.
        self.color = color
        self.left = None
        self.right = None
        self.len = 1


_BLACK = False
_RED = True


def _is_red(x):
    return x is not None and x.color == _RED


def _len(x):
    return x.len if x is not None else 0


class _RBTree:
    """
    Left-leaning red-black tree. Every recursive helper takes the root of a
    subtree and returns the (possibly different) root of the subtree after
    the update, so nodes don't need parent pointers.
    """

    def __init__(self, compare):
        self.compare = compare
        self.root = None

    def search(self, key):
        x = self.root
        while x is not None:
            cmp = self.compare(key, x.key)
            if cmp < 0:
                x = x.left
            elif cmp > 0:
                x = x.right
            else:
                break
        return x

    def insert(self, key, value):
        self.root = self._insert(self.root, key, value)
        self.root.color = _BLACK

    def _insert(self, x, key, value):
        if x is None:
            return _RBNode(key, value, _RED)
        cmp = self.compare(key, x.key)
        if cmp < 0:
            x.left = self._insert(x.left, key, value)
        elif cmp > 0:
            x.right = self._insert(x.right, key, value)
        else:
            x.value = value
        return self._balance(x)

    def delete_min(self):
        # If both children of the root are black, make the root red so that
        # there is a red link to push down.
        if not _is_red(self.root.left) and not _is_red(self.root.right):
            self.root.color = _RED
        self.root = self._delete_min(self.root)
        if self.root is not None:
            self.root.color = _BLACK

    def _delete_min(self, x):
        if x.left is None:
            return None
        if not _is_red(x.left) and not _is_red(x.left.left):
            x = self._move_red_left(x)
        x.left = self._delete_min(x.left)
        return self._balance(x)

    def delete_max(self):
        if not _is_red(self.root.left) and not _is_red(self.root.right):
            self.root.color = _RED
        self.root = self._delete_max(self.root)
        if self.root is not None:
            self.root.color = _BLACK

    def _delete_max(self, x):
        if _is_red(x.left):
            x = self._rotate_right(x)
        if x.right is None:
            return None
        if not _is_red(x.right) and not _is_red(x.right.left):
            x = self._move_red_right(x)
        x.right = self._delete_max(x.right)
        return self._balance(x)

    def delete(self, key):
        # The key must be in the tree.
        if not _is_red(self.root.left) and not _is_red(self.root.right):
            self.root.color = _RED
        self.root = self._delete(self.root, key)
        if self.root is not None:
            self.root.color = _BLACK

    def _delete(self, x, key):
        if self.compare(key, x.key) < 0:
            if not _is_red(x.left) and not _is_red(x.left.left):
                x = self._move_red_left(x)
            x.left = self._delete(x.left, key)
        else:
            if _is_red(x.left):
                x = self._rotate_right(x)
            if self.compare(key, x.key) == 0 and x.right is None:
                return None
            if not _is_red(x.right) and not _is_red(x.right.left):
                x = self._move_red_right(x)
            if self.compare(key, x.key) == 0:
                y = self.minimum(x.right)
                x.key = y.key
                x.value = y.value
                x.right = self._delete_min(x.right)
            else:
                x.right = self._delete(x.right, key)
        return self._balance(x)

    def _rotate_left(self, x):
        y = x.right
        x.right = y.left
        y.left = x
        y.color = x.color
        x.color = _RED
        y.len = x.len
        x.len = 1 + _len(x.left) + _len(x.right)
        return y

    def _rotate_right(self, x):
        y = x.left
        x.left = y.right
        y.right = x
        y.color = x.color
        x.color = _RED
        y.len = x.len
        x.len = 1 + _len(x.left) + _len(x.right)
        return y

    def _flip_colors(self, x):
        x.color = not x.color
        x.left.color = not x.left.color
        x.right.color = not x.right.color

    def _move_red_left(self, x):
        # x is red and both x.left and x.left.left are black. Make x.left or
        # one of its children red.
        self._flip_colors(x)
        if _is_red(x.right.left):
            x.right = self._rotate_right(x.right)
            x = self._rotate_left(x)
            self._flip_colors(x)
        return x

    def _move_red_right(self, x):
        # x is red and both x.right and x.right.left are black. Make x.right
        # or one of its children red.
        self._flip_colors(x)
        if _is_red(x.left.left):
            x = self._rotate_right(x)
            self._flip_colors(x)
        return x

    def _balance(self, x):
        if _is_red(x.right) and not _is_red(x.left):
            x = self._rotate_left(x)
        if _is_red(x.left) and _is_red(x.left.left):
            x = self._rotate_right(x)
        if _is_red(x.left) and _is_red(x.right):
            self._flip_colors(x)
        x.len = 1 + _len(x.left) + _len(x.right)
        return x

    def clear(self):
        self.root = None

    def minimum(self, x):
        while x.left is not None:
            x = x.left
        return x

    def maximum(self, x):
        while x.right is not None:
            x = x.right
        return x

    def floor(self, key):
        x = self.root
        best = None
        while x is not None:
            cmp = self.compare(key, x.key)
            if cmp < 0:
                x = x.left
            elif cmp > 0:
                best = x
                x = x.right
            else:
                return x
        return best

    def ceiling(self, key):
        x = self.root
        best = None
        while x is not None:
            cmp = self.compare(key, x.key)
            if cmp < 0:
                best = x
                x = x.left
            elif cmp > 0:
                x = x.right
            else:
                return x
        return best

    def ith(self, i):
        x = self.root
        while True:
            if i < _len(x.left):
                x = x.left
            elif i > _len(x.left):
                i -= _len(x.left) + 1
                x = x.right
            else:
                return x

    def rank(self, key):
        """
        Return the number of keys less than the given key and whether the key
        itself is in the tree.
        """
        i = 0
        x = self.root
        while x is not None:
            cmp = self.compare(key, x.key)
            if cmp < 0:
                x = x.left
            elif cmp > 0:
                i += _len(x.left) + 1
                x = x.right
            else:
                return i + _len(x.left), True
        return i, False

    def traverse(self, x):
        stack = []
        while stack or x is not None:
            while x is not None:
                stack.append(x)
                x = x.left
            x = stack.pop()
            yield x
            x = x.right

    def traverse_inorder(self, x, lo, hi):
        if x is None:
            return
        cmp_lo = self.compare(lo, x.key)
        cmp_hi = self.compare(hi, x.key)
        if cmp_lo < 0:
            yield from self.traverse_inorder(x.left, lo, hi)
        if cmp_lo <= 0 and cmp_hi >= 0:
            yield x
        if cmp_hi > 0:
            yield from self.traverse_inorder(x.right, lo, hi)

    def check_invariants(self):
        if _CHECK_INVARIANTS:
            assert not _is_red(self.root)
            self._check_tree(self.root, None, None)

    def _check_tree(self, x, lo, hi):
        if x is None:
            return 0, 0

        # Is a binary search tree
        if lo is not None:
            assert self.compare(x.key, lo.key) > 0
        if hi is not None:
            assert self.compare(x.key, hi.key) < 0

        # Red links lean left
        assert not _is_red(x.right)

        # No two red links in a row
        if _is_red(x):
            assert not _is_red(x.left)

        left_len, left_black_height = self._check_tree(x.left, lo, x)
        right_len, right_black_height = self._check_tree(x.right, x, hi)

        # Length is correct
        len = 1 + left_len + right_len
        assert x.len == len

        # Same number of black links in any path to a null link
        black_height = left_black_height + (0 if _is_red(x.left) else 1)
        black_height2 = right_black_height + (0 if _is_red(x.right) else 1)
        assert black_height == black_height2

        return len, black_height


class RedBlackBST(OrderedSymbolTable):
    """
    Ordered symbol table backed by a left-leaning red-black binary search
    tree. get(), put(), delete() and the order statistics are all O(log n).
    The table must not be modified while it is being iterated over.
    """

    def __init__(self, compare=None):
        super().__init__(compare)
        self._rb_tree = _RBTree(self.compare)

    def get(self, key):
        x = self._rb_tree.search(key)
        if x is None:
            raise AbsentKeyError(key)
        return x.value

    def put(self, key, value):
        self._rb_tree.insert(key, value)
        self._rb_tree.check_invariants()

    def delete(self, key):
        if self._rb_tree.search(key) is None:
            raise AbsentKeyError(key)
        self._rb_tree.delete(key)
        self._rb_tree.check_invariants()

    def delete_min(self):
        if self._rb_tree.root is None:
            raise EmptyTableError()
        self._rb_tree.delete_min()
        self._rb_tree.check_invariants()

    def delete_max(self):
        if self._rb_tree.root is None:
            raise EmptyTableError()
        self._rb_tree.delete_max()
        self._rb_tree.check_invariants()

    def contains(self, key):
        return self._rb_tree.search(key) is not None

    def size(self):
        return _len(self._rb_tree.root)

    def clear(self):
        self._rb_tree.clear()

    def min(self):
        if self._rb_tree.root is None:
            raise EmptyTableError()
        return self._rb_tree.minimum(self._rb_tree.root).key

    def max(self):
        if self._rb_tree.root is None:
            raise EmptyTableError()
        return self._rb_tree.maximum(self._rb_tree.root).key

    def floor(self, key):
        x = self._rb_tree.floor(key)
        if x is None:
            raise TooSmallFloorKeyError(key)
        return x.key

    def ceiling(self, key):
        x = self._rb_tree.ceiling(key)
        if x is None:
            raise TooLargeCeilingKeyError(key)
        return x.key

    def rank(self, key):
        i, found = self._rb_tree.rank(key)
        if not found:
            raise AbsentKeyError(key)
        return i

    def select(self, k):
        if k < 0 or k >= self.size():
            raise InvalidRankError(k)
        return self._rb_tree.ith(k).key

    def range_size(self, lo, hi):
        if self.compare(lo, hi) > 0:
            return 0
        hi_rank, found = self._rb_tree.rank(hi)
        lo_rank, _ = self._rb_tree.rank(lo)
        return hi_rank - lo_rank + (1 if found else 0)

    def iterator(self):
        for x in self._rb_tree.traverse(self._rb_tree.root):
            yield (x.key, x.value)

    def range_iterator(self, lo, hi):
        if self.compare(lo, hi) > 0:
            return
        for x in self._rb_tree.traverse_inorder(self._rb_tree.root, lo, hi):
            yield (x.key, x.value)
