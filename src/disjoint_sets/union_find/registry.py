"""Bidirectional label <-> index mapping for a Forest."""

from disjoint_sets.error.exceptions import IndexOutOfRangeError, UnknownLabelError
from disjoint_sets.union_find.forest import Forest


class NameRegistry:
    """Maps arbitrary labels to the dense indices of a Forest.

    Every index handed out by ``register`` is backed by a live cell in the
    forest the registry was created with.
    """

    def __init__(self, forest: Forest) -> None:
        self._forest = forest
        self._index_by_label: dict[str, int] = {}
        self._label_by_index: dict[int, str] = {}

    def __contains__(self, label: object) -> bool:
        return label in self._index_by_label

    def __len__(self) -> int:
        return len(self._index_by_label)

    def register(self, label: str) -> int:
        """Register label and return its index.

        Registering a label that is already known returns the existing index
        and leaves the forest untouched.

        Args:
            label: Node label.

        Returns:
            The index assigned to label.
        """
        index = self._index_by_label.get(label)
        if index is None:
            index = self._forest.add_element()
            self._index_by_label[label] = index
            self._label_by_index[index] = label
        return index

    def lookup(self, label: str) -> int:
        """Return the index of a registered label.

        Raises:
            UnknownLabelError: If label was never registered.
        """
        try:
            return self._index_by_label[label]
        except KeyError:
            raise UnknownLabelError(label) from None

    def label_of(self, index: int) -> str:
        """Return the label registered at index.

        Raises:
            IndexOutOfRangeError: If no label owns index.
        """
        try:
            return self._label_by_index[index]
        except (KeyError, TypeError):
            raise IndexOutOfRangeError(index, len(self)) from None

    def labels(self) -> list[str]:
        """Return all labels in index order."""
        return [self._label_by_index[i] for i in sorted(self._label_by_index)]
