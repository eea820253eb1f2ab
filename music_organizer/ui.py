"""Terminal output for music organization runs."""

from pathlib import Path
from typing import Dict, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table


default_console = Console(soft_wrap=True)


def displayable(text: str) -> str:
    """Make a file name printable.

    Names that are not valid UTF-8 on disk arrive as surrogate escapes, which
    no output stream can encode. Their undecodable bytes become U+FFFD.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace")


class ConsoleUI:
    """User-visible notices printed while songs are copied."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the UI.

        Args:
            console: Console to print to, defaults to the shared stdout console
        """
        self.console = console or default_console

    def display_found(self, count: int):
        """Report how many songs the scan found."""
        self.console.print(f"Found [bold]{count}[/bold] songs.")

    def display_processing(self, file_name: str):
        self.console.print(f"processing: {escape(displayable(file_name))}", style="dim")

    def notify_output_dir_exists(self, output_dir: Path):
        self.console.print(
            f"[yellow]Output directory {escape(displayable(str(output_dir)))} already exists... Continuing.[/yellow]"
        )

    def notify_artist_dir_exists(self, artist: str):
        self.console.print(
            f"[yellow]Directory for artist {escape(displayable(artist))} already exists... Continuing.[/yellow]"
        )

    def notify_file_exists(self, destination: Path):
        """Tell the user a destination file was left alone."""
        self.console.print(
            f"[yellow]File at path `{escape(displayable(str(destination)))}` already exists! "
            f"Use --overwrite to permit overwriting.[/yellow]"
        )

    def display_completion_summary(self, summary: Dict, title: str = "✨ Organization Complete!"):
        """Display a summary of the copy run."""
        table = Table(
            title=title,
            show_header=True,
            header_style="bold green",
        )
        table.add_column("Metric", style="dim", width=30)
        table.add_column("Value", style="white")

        table.add_row("Songs Found", str(summary.get("found", 0)))
        table.add_row("Copied", str(summary.get("copied", 0)))
        table.add_row("Replaced", str(summary.get("replaced", 0)))
        table.add_row("Skipped (already present)", str(summary.get("skipped", 0)))

        self.console.print(table)
