"""JavaScript-style arrays for Python."""
from .errors import ArrayError, DisposedArrayError
from .array import EMPTY_SLOT, Array
from .array_iterator import ArrayIterator, new_iterator

__version__ = "1.0.0"

__all__ = [
    "Array",
    "ArrayError",
    "ArrayIterator",
    "DisposedArrayError",
    "EMPTY_SLOT",
    "new_iterator",
]
