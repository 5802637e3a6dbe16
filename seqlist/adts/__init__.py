from .list_adt import ListADT

__all__ = [
    "ListADT",
]
