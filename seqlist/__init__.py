from .adts import ListADT
from .datastructures import SequenceList
from .exceptions import (
    CollectionError,
    ElementNotFoundError,
    EmptyCollectionError,
    InvalidArgumentError,
)

__all__ = [
    "ListADT",
    "SequenceList",
    "CollectionError",
    "ElementNotFoundError",
    "EmptyCollectionError",
    "InvalidArgumentError",
]
