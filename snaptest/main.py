"""CLI entry point for inspecting and pruning the snapshot file."""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.table import Table

from snaptest.config.settings import get_settings
from snaptest.diff.lines import split_lines
from snaptest.errors import SnaptestError
from snaptest.store.snapfile import Store


console = Console()


def _load(snapfile: str | None) -> Store:
    try:
        return Store.load(snapfile or get_settings().snapfile)
    except SnaptestError as e:
        console.print(f"[red]{e}[/red]", highlight=False)
        sys.exit(1)


snapfile_option = click.option(
    "--snapfile",
    type=click.Path(dir_okay=False),
    default=None,
    help="Snapshot file (default: SNAPTEST_SNAPFILE or tests/.snapfile)",
)


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """snaptest - inspect recorded snapshots."""
    pass


@cli.command(name="list")
@snapfile_option
def list_snapshots(snapfile: str | None) -> None:
    """List stored snapshot keys."""
    store = _load(snapfile)
    keys = store.keys()

    if not keys:
        console.print("[dim]No snapshots recorded.[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Key")
    table.add_column("Lines", justify="right")
    for key in keys:
        table.add_row(key, str(len(split_lines(store.get(key) or ""))))
    console.print(table)
    console.print(f"[dim]{len(keys)} snapshot(s) in {store.path}[/dim]", highlight=False)


@cli.command()
@click.argument("key")
@snapfile_option
def show(key: str, snapfile: str | None) -> None:
    """Print the golden value stored under KEY."""
    store = _load(snapfile)
    value = store.get(key)
    if value is None:
        console.print(f"[red]No snapshot for {key}[/red]", highlight=False)
        sys.exit(1)
    console.print(value, markup=False, highlight=False)


@cli.command()
@click.argument("key")
@snapfile_option
def forget(key: str, snapfile: str | None) -> None:
    """Delete the snapshot under KEY so the next run records it again."""
    store = _load(snapfile)
    try:
        previous = store.remove(key)
    except SnaptestError as e:
        console.print(f"[red]{e}[/red]", highlight=False)
        sys.exit(1)
    if previous is None:
        console.print(f"[yellow]No snapshot for {key}[/yellow]", highlight=False)
        sys.exit(1)
    console.print(f"[green]Forgot {key}[/green]", highlight=False)


@cli.command()
@snapfile_option
def check(snapfile: str | None) -> None:
    """Verify the snapshot file decodes."""
    store = _load(snapfile)
    console.print(f"[green]OK[/green] {len(store)} snapshot(s) in {store.path}", highlight=False)


if __name__ == "__main__":
    cli()
