"""Shared fixtures."""

import pytest

LABELS = list("ABCDEFGHIJ")

LABEL_CONNECTIONS = [
    ("E", "D"),
    ("D", "I"),
    ("G", "F"),
    ("J", "E"),
    ("C", "B"),
    ("I", "J"),
    ("F", "A"),
    ("H", "B"),
    ("G", "B"),
    ("B", "A"),
    ("G", "H"),
]

INDEX_CONNECTIONS = [(LABELS.index(a), LABELS.index(b)) for a, b in LABEL_CONNECTIONS]


@pytest.fixture
def labels():
    """Ten node labels A..J."""
    return list(LABELS)


@pytest.fixture
def label_connections():
    """Connections over A..J that leave two sets: {A,B,C,F,G,H} and {D,E,I,J}."""
    return list(LABEL_CONNECTIONS)


@pytest.fixture
def index_connections():
    """The label connections expressed as positional index pairs."""
    return list(INDEX_CONNECTIONS)


@pytest.fixture
def sample_files(tmp_path, labels, label_connections, index_connections):
    """Write node, index-pair and label-pair files for the ten-node example."""
    nodes_file = tmp_path / "nodes.txt"
    nodes_file.write_text("\n".join(labels) + "\n")

    index_file = tmp_path / "connections.csv"
    index_file.write_text("".join(f"{a},{b}\n" for a, b in index_connections))

    label_file = tmp_path / "label_connections.csv"
    label_file.write_text("".join(f"{a},{b}\n" for a, b in label_connections))

    return {"nodes": nodes_file, "index": index_file, "label": label_file}
