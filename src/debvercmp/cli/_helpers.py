"""Output helpers shared by the CLI commands."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..debian_version import DebianVersion

console = Console()
err_console = Console(stderr=True)


def print_plain(text: str) -> None:
    """Print text verbatim, without markup, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"[green]✓[/green] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    err_console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)


def version_table(version: DebianVersion) -> Table:
    """Build a table showing the fields of a parsed version.

    Absent fields are shown dimmed along with the value used for comparison.
    """
    table = Table(title=escape(str(version)) or "(empty)")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    absent = "[dim](absent, compares as 0)[/dim]"
    table.add_row("epoch", escape(version.epoch) or absent)
    table.add_row("upstream", escape(version.upstream) or "[dim](empty)[/dim]")
    table.add_row("revision", escape(version.revision) or absent)
    return table
