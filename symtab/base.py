import abc
import collections.abc

from symtab.errors import AbsentKeyError


def natural_compare(a, b):
    """
    Three-way comparison using the natural ordering of the keys. Returns a
    negative number if a < b, zero if a == b and a positive number if a > b.
    """
    return (a > b) - (a < b)


class SymbolTable(collections.abc.MutableMapping):
    """
    A table of key-value pairs. Subclasses implement put(), get(), delete(),
    size() and iterator(); the Python mapping protocol is built on top of
    those, so t[key], del t[key], key in t, len(t) and iter(t) behave like a
    dict. Unlike dict.get(), get() raises AbsentKeyError for a missing key.
    """

    @abc.abstractmethod
    def put(self, key, value):
        """
        Insert the key-value pair, overwriting the old value if the key is
        already in the table.
        """

    @abc.abstractmethod
    def get(self, key):
        """
        Return the value associated with the key. Raises AbsentKeyError if
        the key is not present.
        """

    @abc.abstractmethod
    def delete(self, key):
        """
        Remove the key and its value. Raises AbsentKeyError if the key is not
        present, in which case the table is left unchanged.
        """

    @abc.abstractmethod
    def size(self):
        """Return the number of key-value pairs."""

    @abc.abstractmethod
    def iterator(self):
        """
        Return a generator over all of the (key, value) pairs. Each call
        starts a new traversal, and the consumer may stop at any point.
        """

    def contains(self, key):
        try:
            self.get(key)
        except AbsentKeyError:
            return False
        return True

    def is_empty(self):
        return self.size() == 0

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        self.delete(key)

    def __contains__(self, key):
        return self.contains(key)

    def __len__(self):
        return self.size()

    def __iter__(self):
        for key, value in self.iterator():
            yield key

    def values(self):
        for key, value in self.iterator():
            yield value

    def items(self):
        return self.iterator()

    def __repr__(self):
        items = ', '.join('%r: %r' % item for item in self.iterator())
        return '%s({%s})' % (self.__class__.__name__, items)


class OrderedSymbolTable(SymbolTable):
    """
    A symbol table whose keys are ordered by a three-way comparison function
    compare(a, b), which returns a negative number, zero or a positive number
    when a is less than, equal to or greater than b. If no comparison
    function is given, the natural ordering of the keys is used. Iteration is
    in ascending key order.
    """

    def __init__(self, compare=None):
        self.compare = compare if compare else natural_compare

    @abc.abstractmethod
    def min(self):
        """
        Return the smallest key. Raises EmptyTableError if the table is
        empty.
        """

    @abc.abstractmethod
    def max(self):
        """
        Return the largest key. Raises EmptyTableError if the table is empty.
        """

    @abc.abstractmethod
    def delete_min(self):
        """
        Remove the smallest key and its value. Raises EmptyTableError if the
        table is empty.
        """

    @abc.abstractmethod
    def delete_max(self):
        """
        Remove the largest key and its value. Raises EmptyTableError if the
        table is empty.
        """

    @abc.abstractmethod
    def floor(self, key):
        """
        Return the largest key less than or equal to the given key. Raises
        TooSmallFloorKeyError if every key in the table is greater.
        """

    @abc.abstractmethod
    def ceiling(self, key):
        """
        Return the smallest key greater than or equal to the given key.
        Raises TooLargeCeilingKeyError if every key in the table is smaller.
        """

    @abc.abstractmethod
    def rank(self, key):
        """
        Return the number of keys strictly less than the given key. Raises
        AbsentKeyError if the key itself is not present.
        """

    @abc.abstractmethod
    def select(self, k):
        """
        Return the key of rank k, i.e., the k-th smallest key counting from
        zero. Raises InvalidRankError if k is not in [0, size).
        """

    @abc.abstractmethod
    def range_size(self, lo, hi):
        """
        Return the number of keys in [lo, hi], or zero if lo is greater than
        hi.
        """

    @abc.abstractmethod
    def range_iterator(self, lo, hi):
        """
        Return a generator over the (key, value) pairs with keys in [lo, hi],
        in ascending order. Nothing is generated if lo is greater than hi.
        """
