"""Disjoint-set (union-find) clients for large connectivity workloads."""

from disjoint_sets.error.exceptions import (
    IndexOutOfRangeError,
    UnionFindError,
    UnknownLabelError,
)
from disjoint_sets.union_find import BulkClient, BulkConnection, Forest, NamedClient, NameRegistry

__version__ = "0.1.0"

__all__ = [
    "BulkClient",
    "BulkConnection",
    "Forest",
    "IndexOutOfRangeError",
    "NameRegistry",
    "NamedClient",
    "UnionFindError",
    "UnknownLabelError",
]
