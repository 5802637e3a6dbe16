from __future__ import annotations
import ctypes
import logging
from typing import List, Optional, TypeVar

from ..adts.list_adt import ListADT
from ..exceptions import ElementNotFoundError, EmptyCollectionError, InvalidArgumentError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SequenceList(ListADT[T]):
    """An ordered list backed by a growable array.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Only slots [0, size) are live; freed slots are reset to None.
    • Capacity doubles when an insertion finds the buffer full and never shrinks.
    • Indices are not normalized: negative values are rejected.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    # Allocated capacity when none is given.
    DEFAULT_CAPACITY = 10

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            capacity = self.DEFAULT_CAPACITY
        if not isinstance(capacity, int) or capacity <= 0:
            raise InvalidArgumentError(f"capacity must be a positive int, got {capacity!r}")
        self._capacity = capacity
        self._buf = self._make_array(capacity)
        self._size = 0

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a ctypes array of `capacity` py_object slots, all None."""
        buf = (capacity * ctypes.py_object)()
        for i in range(capacity):
            buf[i] = None
        return buf

    def _ensure_capacity(self) -> None:
        """Double the buffer when full so one more element fits.

        Copies the live items into the new buffer in order.
        """
        if self._size < self._capacity:
            return

        new_capacity = self._capacity * 2
        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]

        logger.debug(
            "SequenceList grown from %d to %d slots (size=%d)",
            self._capacity, new_capacity, self._size,
        )
        self._buf = new_buf
        self._capacity = new_capacity

    def _require_not_empty(self) -> None:
        if self._size == 0:
            raise EmptyCollectionError(type(self).__name__)

    def _check_index(self, index: int) -> None:
        """Reject empty lists first, then non-int indices or ones outside [0, size)."""
        self._require_not_empty()
        if not isinstance(index, int):
            raise InvalidArgumentError(f"Index must be an int, got {index!r}")
        if index < 0 or index >= self._size:
            raise InvalidArgumentError(
                f"Index out of bounds: {index} (size {self._size})"
            )

    def _find(self, element: T) -> int:
        """Index of the first slot equal to `element`, or ElementNotFoundError."""
        index = self.index_of(element)
        if index == -1:
            raise ElementNotFoundError(str(element))
        return index

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def add_first(self, element: T) -> None:
        """Insert `element` at index 0. O(n) due to right-shift."""
        self._ensure_capacity()
        for i in range(self._size, 0, -1):
            self._buf[i] = self._buf[i - 1]
        self._buf[0] = element
        self._size += 1

    def add_last(self, element: T) -> None:
        """Append `element` to the end. Amortized O(1)."""
        self._ensure_capacity()
        self._buf[self._size] = element
        self._size += 1

    def add_after(self, existing: T, element: T) -> None:
        """Insert `element` right after the first item equal to `existing`. O(n).

        Raises:
            EmptyCollectionError: if the list is empty.
            ElementNotFoundError: if `existing` is not present.
        """
        self._require_not_empty()
        index = self._find(existing)

        self._ensure_capacity()
        for i in range(self._size, index + 1, -1):
            self._buf[i] = self._buf[i - 1]
        self._buf[index + 1] = element
        self._size += 1

    def remove(self, element: T) -> T:
        """Remove and return the first item equal to `element`. O(n).

        Raises:
            EmptyCollectionError: if the list is empty.
            ElementNotFoundError: if `element` is not present.
        """
        self._require_not_empty()
        return self._pop_at(self._find(element))

    def remove_first(self) -> T:
        """Remove and return the first item. O(n) due to left-shift."""
        self._require_not_empty()
        return self._pop_at(0)

    def remove_last(self) -> T:
        """Remove and return the last item. O(1)."""
        self._require_not_empty()
        return self._pop_at(self._size - 1)

    def _pop_at(self, index: int) -> T:
        val = self._buf[index]

        # Shift elements left to fill the gap.
        for j in range(index, self._size - 1):
            self._buf[j] = self._buf[j + 1]

        # Clear the now-unused last slot and shrink size.
        self._buf[self._size - 1] = None
        self._size -= 1
        return val

    def first(self) -> T:
        self._require_not_empty()
        return self._buf[0]

    def last(self) -> T:
        self._require_not_empty()
        return self._buf[self._size - 1]

    def contains(self, element: T) -> bool:
        """Return True if `element` is present (linear scan).

        Unlike :meth:`index_of`, this raises EmptyCollectionError on an
        empty list.
        """
        self._require_not_empty()
        return self.index_of(element) != -1

    def index_of(self, element: T) -> int:
        """Return first index of `element`, or -1 if absent. Never raises."""
        for i in range(self._size):
            if self._buf[i] == element:
                return i
        return -1

    def get(self, index: int) -> T:
        """Return the item at `index`.

        Raises:
            EmptyCollectionError: if the list is empty (checked before bounds).
            InvalidArgumentError: if `index` is outside [0, size).
        """
        self._check_index(index)
        return self._buf[index]

    def set(self, index: int, element: T) -> None:
        """Overwrite the item at `index`. Same errors as :meth:`get`."""
        self._check_index(index)
        self._buf[index] = element

    def to_py(self) -> List[T]:
        """Snapshot the live items into a plain Python `list`."""
        return [self._buf[i] for i in range(self._size)]

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.to_py()) + "]"

    def __repr__(self) -> str:
        return f"SequenceList({self.to_py()!r})"
