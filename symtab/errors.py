class SymbolTableError(Exception):
    """Base class for the expected failures of a symbol table operation."""


class AbsentKeyError(SymbolTableError, KeyError):
    """The key is not in the table."""


class EmptyTableError(SymbolTableError, IndexError):
    """The operation needs at least one key but the table is empty."""


class InvalidRankError(SymbolTableError, IndexError):
    """The rank is outside of [0, size)."""


class TooSmallFloorKeyError(SymbolTableError, KeyError):
    """The key is smaller than every key in the table, so it has no floor."""


class TooLargeCeilingKeyError(SymbolTableError, KeyError):
    """The key is larger than every key in the table, so it has no ceiling."""
