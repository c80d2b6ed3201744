"""Tests for groups command."""

from click.testing import CliRunner
import pandas as pd
import pytest

from disjoint_sets.cli import main


class TestGroups:
    """Test suite for groups command."""

    @pytest.fixture
    def runner(self):
        """Create Click test runner."""
        return CliRunner()

    def test_groups_table(self, runner, sample_files):
        """Test the group size table."""
        result = runner.invoke(
            main, ["groups", "-n", str(sample_files["nodes"]), "-c", str(sample_files["index"])]
        )
        assert result.exit_code == 0, result.output
        assert "Groups (2 total)" in result.output

    def test_groups_export(self, runner, sample_files, tmp_path):
        """Test CSV export of node membership."""
        output_file = tmp_path / "out" / "groups.csv"
        result = runner.invoke(
            main,
            [
                "groups",
                "-n",
                str(sample_files["nodes"]),
                "-c",
                str(sample_files["label"]),
                "--by-label",
                "-o",
                str(output_file),
            ],
        )
        assert result.exit_code == 0, result.output
        assert output_file.exists()

        df = pd.read_csv(output_file)
        assert list(df.columns) == ["index", "label", "group_index", "group", "group_size"]
        assert df["index"].tolist() == list(range(10))
        assert df["label"].tolist() == list("ABCDEFGHIJ")
        assert df["group_index"].nunique() == 2

        sizes = dict(zip(df["label"], df["group_size"]))
        assert sizes["A"] == 6
        assert sizes["D"] == 4
        assert df.loc[df["label"] == "A", "group"].item() == df.loc[df["label"] == "H", "group"].item()

    def test_groups_top(self, runner, sample_files):
        """Test limiting the table to the largest group."""
        result = runner.invoke(
            main,
            [
                "groups",
                "-n",
                str(sample_files["nodes"]),
                "-c",
                str(sample_files["index"]),
                "--top",
                "1",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "6" in result.output

    def test_duplicate_labels_stay_separate_groups(self, runner, tmp_path):
        """Test that sets whose representatives share a label are not merged."""
        nodes = tmp_path / "nodes.txt"
        nodes.write_text("X\nX\n")
        connections = tmp_path / "connections.csv"
        connections.write_text("")
        output_file = tmp_path / "groups.csv"

        result = runner.invoke(
            main, ["groups", "-n", str(nodes), "-c", str(connections), "-o", str(output_file)]
        )
        assert result.exit_code == 0, result.output
        assert "Groups (2 total)" in result.output
        assert result.output.count("X") >= 2

        df = pd.read_csv(output_file)
        assert df["group_index"].tolist() == [0, 1]
        assert df["group"].tolist() == ["X", "X"]
        assert df["group_size"].tolist() == [1, 1]
