"""Build union-find clients from node and connection files."""

import logging
from pathlib import Path

import pandas as pd

from disjoint_sets.core.config import LoaderConfig
from disjoint_sets.io.loaders import load_connections, load_node_labels
from disjoint_sets.union_find import BulkClient, NamedClient

logger = logging.getLogger(__name__)


def build_bulk_client(
    nodes_path: Path, connections_path: Path, config: LoaderConfig | None = None
) -> BulkClient:
    """Load a node file and an index-pair connection file into a BulkClient.

    Raises:
        FileNotFoundError: If either file does not exist
        ValueError: If the connection file is malformed
        IndexOutOfRangeError: If a connection references an unknown index
    """
    labels = load_node_labels(nodes_path, config)
    connections = load_connections(connections_path, config, by_index=True)

    client = BulkClient(capacity_hint=len(labels))
    client.add_nodes_bulk(labels)
    merged = client.connect_nodes_bulk(connections)

    logger.info(
        f"Applied {len(connections)} connection(s) to {len(labels)} node(s); "
        f"{merged} merged, {client.disjoint_set_count()} set(s) remain"
    )
    return client


def build_named_client(
    nodes_path: Path, connections_path: Path, config: LoaderConfig | None = None
) -> NamedClient:
    """Load a node file and a label-pair connection file into a NamedClient.

    Raises:
        FileNotFoundError: If either file does not exist
        ValueError: If the connection file is malformed
        UnknownLabelError: If a connection references a label missing from
            the node file
    """
    labels = load_node_labels(nodes_path, config)
    connections = load_connections(connections_path, config, by_index=False)

    client = NamedClient(capacity_hint=len(labels))
    for label in labels:
        client.add_node(label)

    merged = 0
    for label_a, label_b in connections:
        if client.connect_nodes(label_a, label_b):
            merged += 1

    logger.info(
        f"Applied {len(connections)} connection(s) to {client.node_count()} node(s); "
        f"{merged} merged, {client.disjoint_set_count()} set(s) remain"
    )
    return client


def partition_frame(client: BulkClient | NamedClient) -> pd.DataFrame:
    """Flatten a client's partition into one row per node.

    Columns: index, label, group_index (root index, unique per set), group
    (representative label, for display only), group_size.
    Rows are ordered by index.
    """
    index_groups = client.get_index_groups()
    label_of = client.label_of

    rows = []
    for root, members in index_groups.items():
        for index in members:
            rows.append(
                {
                    "index": index,
                    "label": label_of(index),
                    "group_index": root,
                    "group": label_of(root),
                    "group_size": len(members),
                }
            )

    df = pd.DataFrame(rows, columns=["index", "label", "group_index", "group", "group_size"])
    return df.sort_values("index").reset_index(drop=True)
