import heapq
import logging

from symtab.binarysearch import BinarySearchST
from symtab.bst import BST
from symtab.redblack import RedBlackBST
from symtab.sequential import SequentialSearchST


IMPLEMENTATIONS = {
    'redblack': RedBlackBST,
    'bst': BST,
    'binarysearch': BinarySearchST,
    'sequential': SequentialSearchST,
}


def read_words(files):
    for f in files:
        for line in f:
            yield from line.split()


def count_words(table, words, min_length=1):
    """
    Count the occurrences of each word at least min_length characters long
    in the given symbol table. Returns the total number of words counted.
    """
    n = 0
    for word in words:
        if len(word) < min_length:
            continue
        n += 1
        if word in table:
            table[word] += 1
        else:
            table[word] = 1
    logging.debug('counted %d words, %d distinct' % (n, len(table)))
    return n


def most_frequent(table, n=1):
    """
    Return a list of the n (word, count) pairs with the highest counts, most
    frequent first. Words with the same count are listed in the order that
    the table iterates over them.
    """
    return heapq.nlargest(n, table.items(), key=lambda item: item[1])
