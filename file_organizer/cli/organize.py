"""
CLI command for organizing files.

Sorts the top-level files of a directory into per-type folders.
"""

import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..organization import (
    FileOrganizer,
    InvalidTargetError,
    MoveStatus,
    OrganizationResult,
)
from ..version import __version__, get_version_string

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

EXIT_USAGE = 1
EXIT_INVALID_TARGET = 3


def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler on stderr."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, console=err_console)],
    )


@click.command()
@click.argument("directory", required=False, type=click.Path())
@click.option(
    "--dry/--run",
    "-d/-r",
    "--preview/--apply",
    "dry_run",
    default=False,
    help="Preview changes without moving files (default: --run)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Verbose output",
)
@click.version_option(__version__, prog_name="organizer")
@click.pass_context
def organize(
    ctx: click.Context,
    directory: Optional[str],
    dry_run: bool,
    verbose: bool,
) -> None:
    """
    Organize the files in DIRECTORY into folders by file type.

    Top-level files are moved into Images, Videos, Audio, Documents,
    Archives or Others. Existing files are never overwritten: name
    conflicts get a " (1)", " (2)", ... suffix. Every move is listed in
    organizer.log inside DIRECTORY.

    \b
    Examples:
        # Preview changes
        organizer ~/Downloads --dry

        # Move files (default)
        organizer ~/Downloads --run
    """
    if directory is None:
        click.echo(ctx.get_help())
        ctx.exit(EXIT_USAGE)

    setup_logging(verbose)

    try:
        organizer = FileOrganizer(Path(directory), dry_run=dry_run)
    except InvalidTargetError as e:
        err_console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(EXIT_INVALID_TARGET)

    console.print(f"[bold cyan]File organizer v{get_version_string()}[/bold cyan]")
    console.print(
        f"\n[cyan]Target directory:[/cyan] {escape(str(organizer.target_directory))}"
    )
    if dry_run:
        console.print("[yellow]⚠ DRY RUN MODE - No files will be moved[/yellow]")
    else:
        console.print("Mode: RUN (files will be moved)")
    console.print()

    result = organizer.organize()
    _display_result(result)


def _display_result(result: OrganizationResult) -> None:
    """Display organization result."""
    for directory in result.created_directories:
        name = escape(directory.name)
        if result.dry_run:
            console.print(f"[dim]Would create directory:[/dim] {name}")
        else:
            console.print(f"[dim]Created directory:[/dim] {name}")

    for record in result.records:
        move = (
            f"{escape(record.source_path.name)}  →  "
            f"{escape(record.category)}/{escape(record.target_path.name)}"
        )
        if result.dry_run:
            console.print(f"[yellow]Would move:[/yellow] {move}")
        elif record.status == MoveStatus.MOVED:
            console.print(f"[green]Moved:[/green] {move}")

    if result.records:
        table = Table(title="Files by category")
        table.add_column("Category", style="cyan")
        table.add_column("Files", style="green", justify="right")

        counts = Counter(record.category for record in result.records)
        for category, count in counts.items():
            table.add_row(category, str(count))

        console.print()
        console.print(table)

    console.print(
        f"\nTotal files: {result.total_files}  "
        f"Moved: {result.moved}  Failed: {result.failed}"
    )

    if result.errors:
        err_console.print("\n[red]Errors:[/red]")
        for error in result.errors:
            err_console.print(f"  [red]• {escape(error)}[/red]")

    if result.dry_run:
        console.print(
            "\n[yellow]Dry-run preview complete. "
            "The following actions WOULD be performed:[/yellow]"
        )
        for record in result.records:
            console.print(escape(record.to_log_line()))
    elif result.log_path:
        console.print(
            f"\n[green]✓ Organization complete.[/green] "
            f"Log written to: {escape(str(result.log_path))}"
        )
    else:
        console.print("\n[yellow]Organization complete, but no log was written.[/yellow]")


if __name__ == "__main__":
    organize()
