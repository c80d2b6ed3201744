"""Exceptions raised by the union-find core."""


class UnionFindError(Exception):
    """Base class for errors raised by forests, registries and clients."""


class UnknownLabelError(UnionFindError, LookupError):
    """A label was referenced before it was registered.

    Attributes:
        label: The label that could not be resolved.
    """

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Unknown node: {label!r}")


class IndexOutOfRangeError(UnionFindError, IndexError):
    """An index does not correspond to a live element.

    Attributes:
        index: The offending index.
        size: Number of live elements at the time of the call.
    """

    def __init__(self, index: object, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index!r} out of range for {size} element(s)")
