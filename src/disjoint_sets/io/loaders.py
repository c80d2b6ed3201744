"""Loaders for node list and connection list files.

Node files hold one label per line. Connection files hold one pair per line,
separated by the configured delimiter, given either as labels or as node
indices.
"""

from collections import Counter
import csv
import io
import logging
from pathlib import Path

import pandas as pd

from disjoint_sets.core.config import LoaderConfig

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = r"[+-]?\d+"


def load_node_labels(path: Path, config: LoaderConfig | None = None) -> list[str]:
    """Load node labels from a newline-delimited file.

    Surrounding whitespace is stripped; blank lines and comment lines are
    skipped.

    Args:
        path: Path to node file
        config: Loader settings (defaults if None)

    Returns:
        Labels in file order

    Raises:
        FileNotFoundError: If the file does not exist
    """
    config = config or LoaderConfig()
    if not path.exists():
        raise FileNotFoundError(f"Node file not found: {path}")

    labels = []
    for line in path.read_text(encoding="utf-8").splitlines():
        label = line.strip()
        if not label:
            continue
        if config.comment_prefix and label.startswith(config.comment_prefix):
            continue
        labels.append(label)

    duplicates = [label for label, count in Counter(labels).items() if count > 1]
    if duplicates:
        logger.warning(f"{path} contains {len(duplicates)} duplicate label(s): {duplicates[:5]}")

    logger.debug(f"Loaded {len(labels)} node label(s) from {path}")
    return labels


def _data_lines(path: Path, config: LoaderConfig) -> tuple[list[int], list[str]]:
    """Return the non-blank, non-comment lines of a file with their line numbers.

    A line is a comment only when its first non-space character is the
    comment prefix, the same rule ``load_node_labels`` applies.
    """
    numbers = []
    lines = []
    for number, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        if config.comment_prefix and stripped.startswith(config.comment_prefix):
            continue
        numbers.append(number)
        lines.append(line)
    return numbers, lines


def _read_pairs(path: Path, config: LoaderConfig) -> pd.DataFrame:
    """Read a connection file into columns a and b indexed by file line number."""
    numbers, lines = _data_lines(path, config)
    if not lines:
        return pd.DataFrame({"a": pd.Series(dtype=str), "b": pd.Series(dtype=str)})

    try:
        df = pd.read_csv(
            io.StringIO("\n".join(lines)),
            sep=config.delimiter,
            header=None,
            names=["a", "b", "extra"],
            index_col=False,
            dtype=str,
            quoting=csv.QUOTE_NONE,
            skipinitialspace=True,
            keep_default_na=False,
            na_values=[""],
        )
    except pd.errors.ParserError as e:
        raise ValueError(f"Malformed connection file {path}: {e}") from e

    df.index = numbers
    for column in ("a", "b", "extra"):
        df[column] = df[column].str.strip().replace("", pd.NA)

    malformed = df[df["extra"].notna() | df[["a", "b"]].isna().any(axis=1)]
    if not malformed.empty:
        line = int(malformed.index[0])
        raise ValueError(f"Malformed connection in {path} at line {line}: expected two fields")

    return df[["a", "b"]]


def load_connections(
    path: Path, config: LoaderConfig | None = None, by_index: bool = True
) -> list[tuple[int, int]] | list[tuple[str, str]]:
    """Load connection pairs from a delimited file.

    Args:
        path: Path to connection file
        config: Loader settings (defaults if None)
        by_index: Parse fields as node indices (shifted by ``index_base``)
            instead of labels

    Returns:
        Pairs in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a line does not hold two fields, or an index field is
            not an integer. The message names the file line.
    """
    config = config or LoaderConfig()
    if not path.exists():
        raise FileNotFoundError(f"Connection file not found: {path}")

    df = _read_pairs(path, config)
    logger.debug(f"Loaded {len(df)} connection(s) from {path}")

    if not by_index:
        return list(zip(df["a"].tolist(), df["b"].tolist()))

    for column in ("a", "b"):
        invalid = df[~df[column].str.fullmatch(_INTEGER_PATTERN).astype(bool)]
        if not invalid.empty:
            line = int(invalid.index[0])
            raise ValueError(
                f"Malformed connection in {path} at line {line}: "
                f"{invalid[column].iloc[0]!r} is not an integer index"
            )

    # Plain ints: indices past int64 still reach the forest's range check
    base = config.index_base
    return [(int(a) - base, int(b) - base) for a, b in zip(df["a"].tolist(), df["b"].tolist())]
