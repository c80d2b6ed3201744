"""Tests for NamedClient."""

import pytest

from disjoint_sets.error.exceptions import UnknownLabelError
from disjoint_sets.union_find import NamedClient


@pytest.fixture
def client():
    """Create an empty NamedClient."""
    return NamedClient()


class TestNamedClientNodes:
    """Test node registration."""

    def test_constructor(self, client):
        """Test empty client."""
        assert client.node_count() == 0
        assert client.disjoint_set_count() == 0

    def test_add_node(self, client):
        """Test adding a single node."""
        client.add_node("A")
        assert client.node_count() == 1
        assert client.disjoint_set_count() == 1

    def test_duplicate_adds_ignored(self, client):
        """Test that adding the same label twice creates one node."""
        client.add_node("A")
        client.add_node("A")
        assert client.node_count() == 1
        assert client.disjoint_set_count() == 1

    def test_node_exists(self, client):
        """Test node_exists for known and unknown labels."""
        client.add_node("A")
        assert client.node_exists("A") is True
        assert client.node_exists("foo") is False

    def test_node_index(self, client):
        """Test node_index for a known label."""
        client.add_node("A")
        client.add_node("B")
        assert client.node_index("A") == 0
        assert client.node_index("B") == 1
        assert client.label_of(1) == "B"

    def test_node_index_unknown(self, client):
        """Test node_index for an unknown label."""
        client.add_node("A")
        with pytest.raises(UnknownLabelError):
            client.node_index("foo")


class TestNamedClientConnections:
    """Test connecting nodes and counting sets."""

    def test_connect_nodes_positive(self, client):
        """Test that connected nodes report as connected."""
        client.add_node("A")
        client.add_node("B")
        assert client.connect_nodes("A", "B") is True
        assert client.nodes_connected("A", "B") is True

    def test_connect_nodes_negative(self, client):
        """Test that unconnected nodes report as not connected."""
        for label in "ABC":
            client.add_node(label)
        client.connect_nodes("A", "B")
        assert client.nodes_connected("A", "C") is False

    def test_disjoint_set_count(self, client):
        """Test set count over merges and no-op connections."""
        for label in "ABC":
            client.add_node(label)
        assert client.disjoint_set_count() == 3
        client.connect_nodes("A", "B")
        assert client.disjoint_set_count() == 2
        client.connect_nodes("B", "C")
        assert client.disjoint_set_count() == 1
        assert client.connect_nodes("B", "C") is False
        assert client.disjoint_set_count() == 1
        assert client.connect_nodes("A", "A") is False
        assert client.disjoint_set_count() == 1

    def test_connect_unknown_node(self, client):
        """Test that connecting an unknown label fails without side effects."""
        client.add_node("A")
        with pytest.raises(UnknownLabelError) as exc_info:
            client.connect_nodes("A", "B")
        assert exc_info.value.label == "B"
        assert client.node_count() == 1
        assert client.disjoint_set_count() == 1

    def test_nodes_connected_unknown(self, client):
        """Test that querying an unknown label fails."""
        client.add_node("A")
        with pytest.raises(UnknownLabelError):
            client.nodes_connected("A", "Z")

    def test_readme_example(self, client, labels, label_connections):
        """Test the ten-node example leaves two sets."""
        for label in labels:
            client.add_node(label)
        for a, b in label_connections:
            client.connect_nodes(a, b)

        assert client.node_count() == 10
        assert client.disjoint_set_count() == 2
        assert client.nodes_connected("A", "H")
        assert client.nodes_connected("D", "J")
        assert not client.nodes_connected("A", "D")

    def test_get_groups(self, client, labels, label_connections):
        """Test groups are keyed by a member label."""
        for label in labels:
            client.add_node(label)
        for a, b in label_connections:
            client.connect_nodes(a, b)

        groups = client.get_groups()
        assert len(groups) == 2
        members = {frozenset(m) for m in groups.values()}
        assert members == {frozenset("ABCFGH"), frozenset("DEIJ")}
        for representative, group in groups.items():
            assert representative in group
