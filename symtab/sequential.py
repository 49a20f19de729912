import operator

from symtab.base import SymbolTable
from symtab.errors import AbsentKeyError


class _Node:
    __slots__ = ['key', 'value', 'next']

    def __init__(self, key, value, next):
        self.key = key
        self.value = value
        self.next = next


class SequentialSearchST(SymbolTable):
    """
    Unordered symbol table backed by a singly linked list. Keys only need to
    support the equality test equals(a, b), which defaults to ==. Every
    operation is a sequential scan, so O(n). New keys are added to the front
    of the list, so iteration goes from the most recently inserted key to
    the least recently inserted one.
    """

    def __init__(self, equals=None):
        self.equals = equals if equals else operator.eq
        self._first = None
        self._len = 0

    def size(self):
        return self._len

    def clear(self):
        self._first = None
        self._len = 0

    def _search(self, key):
        x = self._first
        while x is not None:
            if self.equals(key, x.key):
                break
            x = x.next
        return x

    def get(self, key):
        x = self._search(key)
        if x is None:
            raise AbsentKeyError(key)
        return x.value

    def contains(self, key):
        return self._search(key) is not None

    def put(self, key, value):
        x = self._search(key)
        if x is not None:
            x.value = value
            return
        self._first = _Node(key, value, self._first)
        self._len += 1

    def delete(self, key):
        prev = None
        x = self._first
        while x is not None:
            if self.equals(key, x.key):
                if prev is None:
                    self._first = x.next
                else:
                    prev.next = x.next
                self._len -= 1
                return
            prev = x
            x = x.next
        raise AbsentKeyError(key)

    def iterator(self):
        x = self._first
        while x is not None:
            yield (x.key, x.value)
            x = x.next
