from .sequence_list import SequenceList

__all__ = [
    "SequenceList",
]
