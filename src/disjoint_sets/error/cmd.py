import functools
from typing import Callable

import click
from rich.console import Console

from disjoint_sets.error.exceptions import UnionFindError

console = Console()


def handle_command_errors(func: Callable) -> Callable:
    """Report input and union-find errors as one line and abort with exit code 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (FileNotFoundError, ValueError, UnionFindError) as e:
            console.print(f"[red]Error:[/red] {e}", highlight=False)
            raise click.Abort()
        except Exception as e:
            console.print(f"[red]Unexpected error:[/red] {e}", highlight=False)
            raise click.Abort()

    return wrapper
