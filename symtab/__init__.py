from symtab.base import OrderedSymbolTable, SymbolTable, natural_compare
from symtab.binarysearch import BinarySearchST
from symtab.bst import BST
from symtab.errors import (
    AbsentKeyError,
    EmptyTableError,
    InvalidRankError,
    SymbolTableError,
    TooLargeCeilingKeyError,
    TooSmallFloorKeyError,
)
from symtab.redblack import RedBlackBST
from symtab.sequential import SequentialSearchST
