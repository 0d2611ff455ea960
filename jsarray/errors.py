"""
Error types raised by jsarray.

Only misuse is fatal: a missing swap index, a disposed Array, or an iterator
factory that cannot be resolved. Everything else in the Array API degrades to
a no-op or a missing value (None).
"""


class ArrayError(Exception):
    """Fatal precondition violation. `value` holds the offending message or object."""
    def __init__(self, value):
        self.value = value
        super().__init__(str(value))


class DisposedArrayError(ArrayError):
    """Raised when a disposed Array (or an iterator over one) is used."""
