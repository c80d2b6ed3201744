"""Export the partition formed by a list of connections."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from disjoint_sets.commands.count import build_client, input_options
from disjoint_sets.core.ingest import partition_frame
from disjoint_sets.error.cmd import handle_command_errors

console = Console()


@click.command()
@input_options
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, file_okay=True, dir_okay=False),
    help="Write one row per node (index, label, group_index, group, group_size) to this CSV file",
)
@click.option("--top", type=int, default=10, show_default=True, help="Number of largest groups to show")
@handle_command_errors
def groups(
    nodes: Path,
    connections: Path,
    by_index: bool,
    config_path: Path | None,
    verbose: bool,
    output: Path | None,
    top: int,
) -> None:
    """Show the largest groups and optionally export node membership."""
    client = build_client(nodes, connections, by_index, config_path, verbose)
    df = partition_frame(client)

    sizes = (
        df.groupby("group_index", sort=False)[["group", "group_size"]]
        .first()
        .sort_values("group_size", ascending=False, kind="stable")
        .head(top)
    )

    table = Table(title=f"Groups ({client.disjoint_set_count()} total)")
    table.add_column("Group", style="cyan")
    table.add_column("Size", style="green", justify="right")
    for group, size in zip(sizes["group"], sizes["group_size"]):
        table.add_row(str(group), f"{size:,}")
    console.print(table)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, index=False)
        console.print(f"[green]✓ Saved:[/green] {output}", highlight=False)
