"""Label-addressed union-find client."""

from disjoint_sets.union_find.forest import Forest
from disjoint_sets.union_find.registry import NameRegistry


class NamedClient:
    """Union-find client whose nodes are referred to by label.

    Nodes must be added before they can be connected. Adding a label twice is
    a no-op.

    Example:
        >>> client = NamedClient()
        >>> for label in "ABC":
        ...     client.add_node(label)
        >>> client.connect_nodes("A", "B")
        True
        >>> client.disjoint_set_count()
        2
    """

    def __init__(self, capacity_hint: int = 0) -> None:
        self._forest = Forest(capacity_hint)
        self._registry = NameRegistry(self._forest)

    def add_node(self, label: str) -> None:
        """Add a node, registering the label if it is new."""
        self._registry.register(label)

    def connect_nodes(self, label_a: str, label_b: str) -> bool:
        """Connect two previously added nodes.

        Args:
            label_a: Label of the first node.
            label_b: Label of the second node.

        Returns:
            True if two sets were merged, False if the nodes were already
            connected.

        Raises:
            UnknownLabelError: If either label was never added.
        """
        index_a = self._registry.lookup(label_a)
        index_b = self._registry.lookup(label_b)
        return self._forest.union(index_a, index_b)

    def disjoint_set_count(self) -> int:
        return self._forest.set_count()

    def node_count(self) -> int:
        return len(self._forest)

    def node_exists(self, label: str) -> bool:
        return label in self._registry

    def node_index(self, label: str) -> int:
        """Return the index assigned to label.

        Raises:
            UnknownLabelError: If label was never added.
        """
        return self._registry.lookup(label)

    def nodes_connected(self, label_a: str, label_b: str) -> bool:
        """Check if two nodes are in the same set.

        Raises:
            UnknownLabelError: If either label was never added.
        """
        index_a = self._registry.lookup(label_a)
        index_b = self._registry.lookup(label_b)
        return self._forest.connected(index_a, index_b)

    def label_of(self, index: int) -> str:
        """Return the label registered at index.

        Raises:
            IndexOutOfRangeError: If no node owns index.
        """
        return self._registry.label_of(index)

    def get_groups(self) -> dict[str, list[str]]:
        """Get all sets as {representative label: [member labels]}."""
        label_of = self._registry.label_of
        return {
            label_of(root): [label_of(i) for i in members]
            for root, members in self._forest.groups().items()
        }

    def get_index_groups(self) -> dict[int, list[int]]:
        """Get all sets as {root index: [member indices]}."""
        return self._forest.groups()
