"""Count disjoint sets from node and connection files."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from disjoint_sets.core.config import Config, load_config
from disjoint_sets.core.ingest import build_bulk_client, build_named_client
from disjoint_sets.error.cmd import handle_command_errors
from disjoint_sets.union_find import BulkClient, NamedClient

console = Console()


def input_options(func):
    """Options shared by commands that read a node file and a connection file."""
    func = click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False),
        help="JSON configuration file",
    )(func)
    func = click.option(
        "--by-index/--by-label",
        default=True,
        show_default=True,
        help="Read connections as node index pairs or as node label pairs",
    )(func)
    func = click.option(
        "--connections",
        "-c",
        required=True,
        type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False),
        help="File with one connection per line",
    )(func)
    func = click.option(
        "--nodes",
        "-n",
        required=True,
        type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False),
        help="File with one node label per line",
    )(func)
    return func


def setup_logging(verbose: bool) -> None:
    """Route log records through rich when verbose output is requested."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def build_client(
    nodes: Path, connections: Path, by_index: bool, config_path: Path | None, verbose: bool
) -> BulkClient | NamedClient:
    """Resolve configuration and build the client the options ask for."""
    config: Config = load_config(config_path)
    setup_logging(verbose or config.output.verbose)

    if by_index:
        return build_bulk_client(nodes, connections, config.loader)
    return build_named_client(nodes, connections, config.loader)


@click.command()
@input_options
@handle_command_errors
def count(
    nodes: Path, connections: Path, by_index: bool, config_path: Path | None, verbose: bool
) -> None:
    """Count the disjoint sets formed by a list of connections."""
    client = build_client(nodes, connections, by_index, config_path, verbose)
    console.print(f"[bold]Disjoint sets:[/bold] {client.disjoint_set_count()}", highlight=False)
    console.print(f"[dim]Nodes: {client.node_count():,}[/dim]", highlight=False)
