"""Index-based union-find forest with path compression and union by size.

This module provides the storage layer shared by the named and bulk clients.
Elements are dense integer indices handed out by ``add_element``.
"""

from disjoint_sets.error.exceptions import IndexOutOfRangeError


class Forest:
    """Union-Find (Disjoint Set Union) forest over dense integer indices.

    Each cell holds a parent index and a weight (the subtree size, meaningful
    only at roots). Combining full path compression in ``find`` with union by
    size keeps every operation at amortized inverse-Ackermann cost.

    ``find`` rewrites parent links, so it mutates the forest even though it
    answers a query.

    Attributes:
        capacity_hint: Number of cells pre-allocated at construction.
    """

    def __init__(self, capacity_hint: int = 0) -> None:
        """Initialize an empty forest.

        Args:
            capacity_hint: Expected number of elements. Storage for that many
                cells is allocated up front; the forest still grows past it.

        Raises:
            ValueError: If capacity_hint is negative.
        """
        if capacity_hint < 0:
            raise ValueError(f"capacity_hint must be non-negative, got {capacity_hint}")
        self.capacity_hint = capacity_hint
        self._parent: list[int] = [0] * capacity_hint
        self._size: list[int] = [0] * capacity_hint
        self._count = 0
        self._set_count = 0

    def __len__(self) -> int:
        return self._count

    def add_element(self) -> int:
        """Append a new singleton set and return its index."""
        index = self._count
        if index < len(self._parent):
            self._parent[index] = index
            self._size[index] = 1
        else:
            self._parent.append(index)
            self._size.append(1)
        self._count += 1
        self._set_count += 1
        return index

    def _check(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRangeError(index, self._count)
        if index < 0 or index >= self._count:
            raise IndexOutOfRangeError(index, self._count)

    def find(self, index: int) -> int:
        """Find the root of the set containing index, compressing the path.

        Every cell visited on the way up is re-pointed directly at the root.

        Args:
            index: Element to find the root of.

        Returns:
            Index of the root cell.

        Raises:
            IndexOutOfRangeError: If index is not a live element.
        """
        self._check(index)
        parent = self._parent

        root = index
        while parent[root] != root:
            root = parent[root]

        # Path compression
        while parent[index] != root:
            parent[index], index = root, parent[index]

        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets containing a and b.

        The root with the smaller size is attached under the larger one. On a
        tie the root of b goes under the root of a.

        Args:
            a: Element from first set.
            b: Element from second set.

        Returns:
            True if two sets were merged, False if a and b were already in
            the same set.

        Raises:
            IndexOutOfRangeError: If either index is not a live element.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a

        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self._set_count -= 1
        return True

    def set_count(self) -> int:
        """Return the number of disjoint sets."""
        return self._set_count

    def connected(self, a: int, b: int) -> bool:
        """Check if a and b are in the same set."""
        return self.find(a) == self.find(b)

    def component_size(self, index: int) -> int:
        """Return the number of elements in the set containing index."""
        return self._size[self.find(index)]

    def groups(self) -> dict[int, list[int]]:
        """Get all sets as {root: [members]}.

        Members are listed in ascending index order.
        """
        groups: dict[int, list[int]] = {}
        for index in range(self._count):
            groups.setdefault(self.find(index), []).append(index)
        return groups
