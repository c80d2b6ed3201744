"""Union-find forest and the clients built on it."""

from disjoint_sets.union_find.bulk_client import BulkClient, BulkConnection
from disjoint_sets.union_find.client import NamedClient
from disjoint_sets.union_find.forest import Forest
from disjoint_sets.union_find.registry import NameRegistry

__all__ = ["BulkClient", "BulkConnection", "Forest", "NamedClient", "NameRegistry"]
