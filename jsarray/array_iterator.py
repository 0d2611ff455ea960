"""
Position iterator returned by Array.entries().

Usage:
    it = Array("ant", "bison", "camel").entries()
    it.value              # -> Array [ 1, 'ant' ]
    it.next().value       # -> Array [ 2, 'bison' ]
    it.previous().cursor  # -> 1

The cursor saturates at both ends; the iterator never reports exhaustion.
Callers that need to detect the end compare successive cursor values.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from .errors import DisposedArrayError

_log = logging.getLogger("jsarray.array_iterator")


class ArrayIterator:
    """Cursor over an Array exposing `value`, a fresh (index, element) Array per move."""

    def __init__(self, existing_array, array_type):
        if not array_type.isArray(existing_array):
            raise DisposedArrayError("cannot iterate a disposed Array")
        self._array_type = array_type
        self._array = existing_array
        self._ptr = 1
        self.value: Optional[Any] = None
        self._generate()

    @property
    def cursor(self) -> int:
        return self._ptr

    def next(self) -> "ArrayIterator":
        self._ptr = self._clamp(self._ptr + 1)
        self._generate()
        return self

    def previous(self) -> "ArrayIterator":
        self._ptr = self._clamp(self._ptr - 1)
        self._generate()
        return self

    def dispose(self) -> None:
        if self._array_type.isArray(self.value):
            self.value.dispose()
        self.value = None
        self._array = None

    def _target(self):
        if self._array is None or not self._array_type.isArray(self._array):
            raise DisposedArrayError("ArrayIterator used after its Array was disposed")
        return self._array

    def _clamp(self, position: int) -> int:
        # an empty Array still keeps the cursor at 1
        upper = max(self._target().length, 1)
        return min(max(position, 1), upper)

    def _generate(self) -> None:
        index = self._ptr
        value = self._target()[index]

        if self._array_type.isArray(self.value):
            self.value.dispose()

        self.value = self._array_type.of(index, value)

    def __repr__(self) -> str:
        return f"ArrayIterator(cursor={self._ptr}, value={self.value!r})"


def new_iterator(existing_array, array_type) -> ArrayIterator:
    """Default iterator factory used by Array.entries()."""
    _log.debug("new_iterator: %d element(s)", existing_array.length)
    return ArrayIterator(existing_array, array_type)
