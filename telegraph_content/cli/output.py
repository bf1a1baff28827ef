"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Status lines are colored; document output (JSON, HTML, markdown) is
printed verbatim so it can be piped into a file.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.spinner import Spinner
from rich.table import Table

from telegraph_content.records.models import Page


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Logging verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Content is valid")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def document(self, text: str) -> None:
        """Print document text (JSON, HTML, markdown) without any markup.

        Args:
            text: Text to print as-is
        """
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner while a request is in flight.

        Example:
            >>> with handler.spinner("Fetching page..."):
            ...     page = api.get_page(path)
        """
        spinner = Spinner("dots", text=escape(message))
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    def print_page(self, page: Page) -> None:
        """Display page metadata as a two-column table.

        Server-supplied text is escaped so it is never read as markup.

        Args:
            page: Page to describe
        """
        table = Table(title=escape(page.title), show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")

        table.add_row("Path", escape(page.path))
        table.add_row("URL", escape(page.url))
        if page.description:
            table.add_row("Description", escape(page.description))
        if page.author_name:
            table.add_row("Author", escape(page.author_name))
        if page.author_url:
            table.add_row("Author URL", escape(page.author_url))
        if page.image_url:
            table.add_row("Image", escape(page.image_url))
        table.add_row("Views", str(page.views))
        if page.can_edit is not None:
            table.add_row("Can edit", "yes" if page.can_edit else "no")
        if page.content is not None:
            table.add_row("Content nodes", str(len(page.content)))

        self.console.print(table)
