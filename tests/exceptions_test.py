import os
import sys

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from seqlist.exceptions import (
    CollectionError,
    ElementNotFoundError,
    EmptyCollectionError,
    InvalidArgumentError,
)


def test_empty_collection_carries_name():
    err = EmptyCollectionError("SequenceList")
    assert err.collection == "SequenceList"
    assert str(err) == "The SequenceList is empty."


def test_element_not_found_carries_text():
    err = ElementNotFoundError("42")
    assert err.element == "42"
    assert "42" in str(err)
    assert isinstance(err, LookupError)


def test_invalid_argument_is_value_error():
    err = InvalidArgumentError("Index out of bounds")
    assert isinstance(err, ValueError)
    assert str(err) == "Index out of bounds"


def test_all_share_base():
    for cls in (EmptyCollectionError, ElementNotFoundError, InvalidArgumentError):
        assert issubclass(cls, CollectionError)
