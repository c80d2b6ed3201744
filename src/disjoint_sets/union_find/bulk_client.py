"""Index-addressed union-find client for high-volume ingestion.

Labels are accepted in one ordered batch and the i-th label becomes index i,
so connections can be supplied as plain index pairs without any per-call
label lookup.
"""

from dataclasses import dataclass
from typing import Iterable

from disjoint_sets.error.exceptions import IndexOutOfRangeError
from disjoint_sets.union_find.forest import Forest


@dataclass(frozen=True)
class BulkConnection:
    """A connection between two nodes given by index.

    Attributes:
        a: Index of the first node
        b: Index of the second node
    """

    a: int
    b: int


class BulkClient:
    """Union-find client whose nodes are referred to by position.

    Labels are kept only so results can be reported by name; duplicates are
    not detected and each occurrence becomes its own element.
    """

    def __init__(self, capacity_hint: int = 0) -> None:
        self._forest = Forest(capacity_hint)
        self._labels: list[str] = []

    def add_nodes_bulk(self, labels: Iterable[str]) -> None:
        """Add one node per label, indexed by position.

        Positions continue from the current node count when called more than
        once.

        Args:
            labels: Ordered node labels.
        """
        forest = self._forest
        for label in labels:
            forest.add_element()
            self._labels.append(label)

    def connect_nodes_bulk(
        self, connections: Iterable[BulkConnection | tuple[int, int]]
    ) -> int:
        """Apply a union for each connection, in order.

        Connections applied before a failing one are kept.

        Args:
            connections: Index pairs, as BulkConnection or (a, b) tuples.

        Returns:
            Number of connections that merged two sets.

        Raises:
            IndexOutOfRangeError: If a connection references an index that was
                not bulk-added.
        """
        union = self._forest.union
        merged = 0
        for connection in connections:
            if isinstance(connection, BulkConnection):
                a, b = connection.a, connection.b
            else:
                a, b = connection
            if union(a, b):
                merged += 1
        return merged

    def disjoint_set_count(self) -> int:
        return self._forest.set_count()

    def node_count(self) -> int:
        return len(self._forest)

    def nodes_connected(self, a: int, b: int) -> bool:
        """Check if the nodes at indices a and b are in the same set.

        Raises:
            IndexOutOfRangeError: If either index was not bulk-added.
        """
        return self._forest.connected(a, b)

    def label_of(self, index: int) -> str:
        """Return the label supplied for index.

        Raises:
            IndexOutOfRangeError: If index was not bulk-added.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRangeError(index, len(self._labels))
        if index < 0 or index >= len(self._labels):
            raise IndexOutOfRangeError(index, len(self._labels))
        return self._labels[index]

    def get_groups(self) -> dict[str, list[str]]:
        """Get all sets as {representative label: [member labels]}.

        Duplicate labels may collide as keys; use ``get_index_groups`` when
        labels are not unique.
        """
        labels = self._labels
        return {
            labels[root]: [labels[i] for i in members]
            for root, members in self._forest.groups().items()
        }

    def get_index_groups(self) -> dict[int, list[int]]:
        """Get all sets as {root index: [member indices]}."""
        return self._forest.groups()
