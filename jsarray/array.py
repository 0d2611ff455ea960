"""
JavaScript-style Array container.

Usage:
    from jsarray import Array
    a = Array("ant", "bison", "camel")
    a.push("duck").sort()
    a.indexOf("bison")        # -> 2
    a.map(lambda x: x.upper()).join(",")

Addressing is 1-based: index 1 is the first element. Callbacks are invoked
JavaScript-style as fn(value, index, data); a callback that accepts fewer
positional parameters only receives the leading ones, so `lambda x: x * 2`
works as a map callback.

Policy notes:
 - missing values are None: out-of-range reads, failed finds and no-op
   operations never raise
 - a disposed Array raises DisposedArrayError on any further use
 - values() hands out the live backing list, not a copy
"""
from __future__ import annotations

import functools
import inspect
import logging
import math
from typing import Any, Callable, Iterator, List, Optional

from .errors import ArrayError, DisposedArrayError

_log = logging.getLogger("jsarray.array")

# Placeholder stored by the capacity form of the constructor, e.g. Array(3)
EMPTY_SLOT = "Empty"

# Resolved lazily on the first entries() call unless Array.configure() ran first
_ITERATOR_FACTORY: Optional[Callable] = None


# --- helpers ------------------------------------------------------------------
def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _unwrap(value) -> Optional[list]:
    """Return the elements of an aggregate (Array, list, tuple) or None for scalars."""
    if isinstance(value, Array):
        return value._data
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def _adapt_callback(fn: Callable, max_args: int) -> Callable:
    """
    Wrap `fn` so it is only passed as many positional arguments as it accepts.

    JavaScript drops surplus callback arguments silently; Python does not, so
    `arr.map(lambda x: x + 1)` would fail with the full (value, index, data)
    triple. Callables without an inspectable signature get every argument.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return fn
    accepted = 0
    for param in sig.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return fn
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            accepted += 1
    if accepted >= max_args:
        return fn

    def _call(*args):
        return fn(*args[:accepted])
    return _call


def _first_char_code(value) -> int:
    text = str(value)
    return ord(text[0]) if text else 0


def _default_comparator(a, b) -> bool:
    # Compares the first character only; "apple" and "avocado" tie.
    return _first_char_code(a) < _first_char_code(b)


def _live(method):
    """Fail fast when a method is called on a disposed Array."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self._data is None:
            raise DisposedArrayError(f"Array.{method.__name__} called on a disposed Array")
        return method(self, *args, **kwargs)
    return wrapper


# --- Array --------------------------------------------------------------------
class Array:
    """
    Mutable ordered sequence with the JavaScript Array method set.

    Array(5) pre-sizes five EMPTY_SLOT placeholders; any other argument list
    becomes the elements. Use Array.of(5) for a one-element array holding 5.
    """

    def __init__(self, *values: Any):
        self._populate(values, force=False)

    def _populate(self, values, force: bool) -> None:
        is_capacity = len(values) == 1 and _is_number(values[0]) and not force
        if is_capacity:
            # nan and inf give no usable size
            size = int(values[0]) if math.isfinite(values[0]) else 0
            self._data: Optional[List[Any]] = [EMPTY_SLOT] * max(size, 0)
        else:
            self._data = list(values)
        self._is_array = True

    # --- construction -------------------------------------------------------
    @classmethod
    def _new(cls, force: bool, *values: Any) -> "Array":
        """Create an Array; with force=True a single number is an element, not a capacity."""
        self = cls.__new__(cls)
        self._populate(values, force=force)
        return self

    @classmethod
    def new(cls, *values: Any) -> "Array":
        return cls._new(False, *values)

    @classmethod
    def of(cls, *values: Any) -> "Array":
        return cls._new(True, *values)

    @classmethod
    def from_(cls, item: Any) -> "Array":
        """Strings split into characters, numbers wrap into one element, anything else is empty."""
        if isinstance(item, str):
            return cls._new(True, *item)
        if _is_number(item):
            return cls._new(True, item)
        _log.debug("Array.from_: unsupported type %s, returning empty Array", type(item).__name__)
        return cls._new(True)

    @staticmethod
    def isArray(candidate: Any) -> bool:
        return isinstance(candidate, Array) and getattr(candidate, "_is_array", False) is True

    @classmethod
    def configure(cls, iterator_factory: Optional[Callable] = None, config=None) -> Callable:
        """
        Set the factory entries() uses to build iterators.

        Pass a callable `factory(array, array_type)` directly, or a ConfigParser
        from jsarray.config.load_config() to resolve one by module/attribute name.
        """
        global _ITERATOR_FACTORY
        if iterator_factory is None:
            from . import config as _config
            iterator_factory = _config.resolve_iterator_factory(
                config if config is not None else _config.load_config()
            )
        if not callable(iterator_factory):
            raise ArrayError(f"iterator factory {iterator_factory!r} is not callable")
        _ITERATOR_FACTORY = iterator_factory
        return iterator_factory

    # --- protocol -------------------------------------------------------------
    @property
    @_live
    def length(self) -> int:
        return len(self._data)

    @_live
    def __len__(self) -> int:
        return len(self._data)

    @_live
    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    @_live
    def __contains__(self, item) -> bool:
        return self.includes(item)

    @_live
    def __getitem__(self, index: int) -> Any:
        if not isinstance(index, int):
            raise TypeError(f"Array indices must be integers, not {type(index).__name__}")
        if 1 <= index <= len(self._data):
            return self._data[index - 1]
        return None

    @_live
    def __setitem__(self, index: int, value: Any) -> None:
        if not isinstance(index, int):
            raise TypeError(f"Array indices must be integers, not {type(index).__name__}")
        if 1 <= index <= len(self._data):
            self._data[index - 1] = value
        else:
            # no holes: anything outside the live range lands at length + 1
            self._data.append(value)

    def __repr__(self) -> str:
        if self._data is None:
            return "Array <disposed>"
        return "Array [ " + ", ".join(repr(v) for v in self._data) + " ]"

    # --- private loops ----------------------------------------------------------
    def _filter_loop(self, callback: Callable) -> "Array":
        callback = _adapt_callback(callback, 3)
        filtered = []
        for index, value in enumerate(self._data, start=1):
            if callback(value, index, self._data):
                filtered.append(value)
        self._data = filtered
        return self

    def _find_loop(self, reversed_: bool, callback: Callable):
        """Return (value, index) of the first match scanning in the given direction, else (None, None)."""
        callback = _adapt_callback(callback, 3)
        data = self._data
        positions = range(len(data), 0, -1) if reversed_ else range(1, len(data) + 1)
        for index in positions:
            value = data[index - 1] if index <= len(data) else None
            if callback(value, index, data):
                return value, index
        return None, None

    def _swap(self, first: int, second: int) -> None:
        if first is None or second is None:
            raise ArrayError("Please specify which two indices you'd like to swap.")
        data = self._data
        data[first - 1], data[second - 1] = data[second - 1], data[first - 1]

    def _partition(self, start: int, end: int, comparator: Callable) -> int:
        pivot = self._data[end - 1]
        store = start - 1
        for index in range(start, end):
            if comparator(self._data[index - 1], pivot):
                store += 1
                self._swap(store, index)
        store += 1
        self._swap(store, end)
        return store

    def _quick_sort(self, start: int, end: int, comparator: Callable) -> None:
        # Recurse into the smaller side, loop on the larger one.
        while start < end:
            if start + 1 == end:
                if comparator(self._data[end - 1], self._data[start - 1]):
                    self._swap(start, end)
                return
            pivot = self._partition(start, end, comparator)
            if pivot - start < end - pivot:
                self._quick_sort(start, pivot - 1, comparator)
                start = pivot + 1
            else:
                self._quick_sort(pivot + 1, end, comparator)
                end = pivot - 1

    # --- queries ----------------------------------------------------------------
    @_live
    def at(self, index: Optional[int] = None) -> Any:
        """Element at `index`; zero and negative indices count back from the end (at(0) is the last)."""
        index = 1 if index is None else int(index)
        if index < 1:
            index = len(self._data) + index
        return self[index]

    @_live
    def includes(self, item: Any) -> bool:
        _, index = self._find_loop(False, lambda value: value == item)
        return index is not None

    @_live
    def indexOf(self, item: Any) -> int:
        for index, value in enumerate(self._data, start=1):
            if value == item:
                return index
        return -1

    @_live
    def lastIndexOf(self, item: Any) -> Optional[int]:
        """Distance from the end of the last match (length - position), not its position."""
        length = len(self._data)
        for index in range(length, 0, -1):
            if self._data[index - 1] == item:
                return length - index
        return None

    @_live
    def find(self, callback: Callable) -> Any:
        value, _ = self._find_loop(False, callback)
        return value

    @_live
    def findIndex(self, callback: Callable) -> Optional[int]:
        _, index = self._find_loop(False, callback)
        return index

    @_live
    def findLast(self, callback: Callable) -> Any:
        value, _ = self._find_loop(True, callback)
        return value

    @_live
    def findLastIndex(self, callback: Callable) -> Optional[int]:
        _, index = self._find_loop(True, callback)
        return index

    @_live
    def some(self, callback: Optional[Callable]) -> bool:
        if not callback:
            return False
        _, index = self._find_loop(False, callback)
        return index is not None

    @_live
    def every(self, callback: Callable) -> bool:
        callback = _adapt_callback(callback, 3)
        for index, value in enumerate(self._data, start=1):
            if not callback(value, index, self._data):
                return False
        return True

    @_live
    def forEach(self, callback: Callable, reverse: bool = False) -> "Array":
        callback = _adapt_callback(callback, 3)
        data = self._data
        positions = range(len(data), 0, -1) if reverse else range(1, len(data) + 1)
        for index in positions:
            value = data[index - 1] if index <= len(data) else None
            callback(value, index, data)
        return self

    @_live
    def values(self) -> List[Any]:
        """The live backing list. Mutating it mutates the Array."""
        return self._data

    @_live
    def join(self, separator: str = "") -> str:
        parts: List[str] = []

        def _join_recursively(items):
            for value in items:
                nested = _unwrap(value)
                if nested is not None:
                    _join_recursively(nested)
                else:
                    parts.append("" if value is None else str(value))

        _join_recursively(self._data)
        return separator.join(parts)

    # --- non-mutating transforms ------------------------------------------------
    @_live
    def map(self, callback: Optional[Callable]) -> "Array":
        """New Array of callback results; a None result keeps the original element."""
        result = Array._new(True, *self._data)
        if callback is None:
            return result
        callback = _adapt_callback(callback, 3)
        data = result._data
        for index in range(1, len(data) + 1):
            if index > len(data):
                break
            value = data[index - 1]
            new_value = callback(value, index, data)
            if index <= len(data):
                data[index - 1] = value if new_value is None else new_value
        return result

    @_live
    def filter(self, callback: Optional[Callable]) -> List[Any]:
        """Plain list of the elements for which callback is truthy (not an Array)."""
        if callback is None:
            return list(self._data)
        copy = Array._new(True, *self._data)
        data = copy._filter_loop(callback)._data
        copy.dispose()
        return data

    @_live
    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> List[Any]:
        """Elements from `start` to `end` inclusive as a plain list; negative bounds count from the end."""
        length = len(self._data)
        if _is_number(start) and end is None:
            first = length + start if start < 0 else start
            return self.filter(lambda _, index: index >= first)
        if _is_number(start) and _is_number(end):
            first = length + start if start < 0 else start
            last = length + end if end < 0 else end
            return self.filter(lambda _, index: first <= index <= last)
        return list(self._data)

    @_live
    def flat(self, depth: Optional[int] = 1) -> "Array":
        """
        Copy with nested aggregates spliced in place, one per depth unit.

        Each unit of depth expands only the first nested Array/list/tuple found:
        Array.of(1, [2, 3], [4, 5]).flat(1) -> Array [ 1, 2, 3, [4, 5] ].
        """
        result = Array._new(True, *self._data)
        data = result._data
        remaining = 1 if depth is None else depth
        while remaining > 0:
            for index, value in enumerate(data):
                nested = _unwrap(value)
                if nested is not None:
                    data[index:index + 1] = list(nested)
                    break
            else:
                break
            remaining -= 1
        return result

    @_live
    def flatMap(self, callback: Optional[Callable]) -> "Array":
        mapped = self.map(callback)
        flattened = mapped.flat(1)
        mapped.dispose()
        return flattened

    @_live
    def reduce(self, callback: Callable, initial: Any = None) -> Any:
        """Left fold; a missing initial value starts the accumulator at 0."""
        return self._fold(callback, initial, reverse=False)

    @_live
    def reduceRight(self, callback: Callable, initial: Any = None) -> Any:
        return self._fold(callback, initial, reverse=True)

    def _fold(self, callback, initial, reverse):
        accumulator = 0 if initial is None else initial
        callback = _adapt_callback(callback, 4)

        def _step(value, index, data):
            nonlocal accumulator
            accumulator = callback(accumulator, value, index, data)

        self.forEach(_step, reverse)
        return accumulator

    @_live
    def toSpliced(self, index: int, deleteCount: Optional[int] = None, *inserts: Any) -> "Array":
        result = Array._new(True, *self._data)
        result.splice(index, deleteCount, *inserts)
        return result

    @_live
    def toReversed(self) -> "Array":
        result = Array._new(True, *self._data)
        result.reverse()
        return result

    @_live
    def toSorted(self, comparator: Optional[Callable] = None) -> "Array":
        result = Array._new(True, *self._data)
        result.sort(comparator)
        return result

    @_live
    def with_(self, index: int, value: Any) -> "Array":
        result = Array._new(True, *self._data)
        result[index] = value
        return result

    @_live
    def concat(self, *items: Any) -> "Array":
        """New Array with `items` appended; aggregates contribute their elements, never themselves."""
        result = Array._new(True, *self._data)
        for item in items:
            nested = _unwrap(item)
            if nested is None:
                result._data.append(item)
            else:
                result._data.extend(nested)
        return result

    # --- mutation -----------------------------------------------------------------
    @_live
    def push(self, *values: Any) -> "Array":
        self._data.extend(values)
        return self

    @_live
    def pop(self) -> Any:
        if not self._data:
            return None
        return self._data.pop()

    @_live
    def shift(self) -> Any:
        if not self._data:
            return None
        return self._data.pop(0)

    @_live
    def unshift(self, *values: Any) -> int:
        self._data[0:0] = values
        return len(self._data)

    @_live
    def splice(self, index: int, deleteCount: Optional[int] = None, *inserts: Any) -> "Array":
        """
        Remove/replace elements starting at `index`.

        Works one slot at a time: remove the element at i, insert every
        replacement at i, count down, then move on to i + 1. With replacements
        the deletions therefore interleave, e.g. splice(2, 2, "x") on
        a, b, c, d, e gives a, x, x, d, e, and splice(2, 2) gives a, c, e.
        Omitting deleteCount truncates from `index` and appends the
        replacements. An index past the end is a no-op.
        """
        data = self._data
        length = len(data)
        if index < 1:
            index = max(length + index, 1)
        if index > length:
            _log.debug("Array.splice: index %d past length %d, nothing to do", index, length)
            return self
        if deleteCount is None:
            data[index - 1:] = inserts
            return self
        if deleteCount <= 0:
            data[index - 1:index - 1] = inserts
            return self

        remaining = deleteCount
        for i in range(index, length + 1):
            if i > len(data):
                break
            del data[i - 1]
            data[i - 1:i - 1] = inserts
            remaining -= 1
            if remaining == 0:
                break
        return self

    @_live
    def fill(self, value: Any, start: Optional[int] = None, end: Optional[int] = None) -> "Array":
        """Overwrite positions start+1 .. end (defaults: whole array) with `value`."""
        length = len(self._data)
        first = int(start) + 1 if _is_number(start) else 1
        last = int(end) if _is_number(end) else length
        for index in range(max(first, 1), min(last, length) + 1):
            self._data[index - 1] = value
        return self

    @_live
    def reverse(self) -> "Array":
        self._data = self._data[::-1]
        return self

    @_live
    def sort(self, comparator: Optional[Callable] = None) -> "Array":
        """
        In-place quicksort. comparator(a, b) returns True when a belongs before b.

        Without a comparator, elements are ordered by the character code of the
        first character of str(element) only.
        """
        if comparator is None:
            comparator = _default_comparator
        self._quick_sort(1, len(self._data), comparator)
        return self

    @_live
    def entries(self):
        """ArrayIterator over (index, value) pairs, built by the configured iterator factory."""
        factory = _ITERATOR_FACTORY
        if factory is None:
            factory = Array.configure()
        return factory(self, type(self))

    def dispose(self) -> None:
        """Drop the backing list and untag the Array. Any later method call raises DisposedArrayError."""
        if self._data is None:
            return
        _log.debug("Array.dispose: releasing %d element(s)", len(self._data))
        self._data = None
        self._is_array = False
