"""Error types raised by the list containers.

Every failure a list operation can produce is one of the three classes
below, all rooted at :class:`CollectionError` so callers can catch them
together.
"""

from __future__ import annotations


class CollectionError(Exception):
    """Base class for container errors."""


class EmptyCollectionError(CollectionError):
    """Raised when an operation needs at least one element but the collection is empty."""

    def __init__(self, collection: str) -> None:
        self.collection = collection
        super().__init__(f"The {collection} is empty.")


class ElementNotFoundError(CollectionError, LookupError):
    """Raised when a required element has no equal match in the collection."""

    def __init__(self, element: str) -> None:
        self.element = element
        super().__init__(f"Element not found: {element}")


class InvalidArgumentError(CollectionError, ValueError):
    """Raised for out-of-range indices and other invalid arguments."""
