"""CLI entry point for disjoint-sets."""

import click

from disjoint_sets import __version__
from disjoint_sets.commands import count, groups


@click.group()
@click.version_option(version=__version__, prog_name="disjoint-sets")
@click.pass_context
def main(ctx):
    """Disjoint-set (union-find) connectivity tool.

    Reads a node list and a connection list and reports how the nodes
    partition into connected groups.
    """
    ctx.ensure_object(dict)


# Register commands
main.add_command(count.count)
main.add_command(groups.groups)


if __name__ == "__main__":
    main()
