from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class ListADT(ABC, Generic[T]):
    """Abstract contract for an ordered, index-addressable list.

    Elements only need to support ``==``; every search-based operation
    (``add_after``, ``remove``, ``contains``, ``index_of``) uses equality and
    takes the first match from the front.

    Error contract
    --------------
    • :class:`~seqlist.exceptions.EmptyCollectionError` when an operation
      needs at least one element and the list has none.
    • :class:`~seqlist.exceptions.ElementNotFoundError` when a required
      element is absent.
    • :class:`~seqlist.exceptions.InvalidArgumentError` for indices outside
      ``[0, size())``.
    """

    __slots__ = ()

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements."""

    @abstractmethod
    def add_first(self, element: T) -> None:
        """Insert `element` at the front."""

    @abstractmethod
    def add_last(self, element: T) -> None:
        """Append `element` at the back."""

    @abstractmethod
    def add_after(self, existing: T, element: T) -> None:
        """Insert `element` right after the first element equal to `existing`."""

    @abstractmethod
    def remove(self, element: T) -> T:
        """Remove and return the first element equal to `element`."""

    @abstractmethod
    def remove_first(self) -> T:
        """Remove and return the front element."""

    @abstractmethod
    def remove_last(self) -> T:
        """Remove and return the back element."""

    @abstractmethod
    def first(self) -> T:
        """Return the front element without removing it."""

    @abstractmethod
    def last(self) -> T:
        """Return the back element without removing it."""

    @abstractmethod
    def contains(self, element: T) -> bool:
        """Return True if an equal element is present."""

    @abstractmethod
    def index_of(self, element: T) -> int:
        """Return the index of the first equal element, or -1."""

    @abstractmethod
    def get(self, index: int) -> T:
        """Return the element at `index`."""

    @abstractmethod
    def set(self, index: int, element: T) -> None:
        """Overwrite the element at `index`."""
