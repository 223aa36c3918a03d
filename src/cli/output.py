"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich library for spinners, colored output, and formatted text.
Supports verbosity levels and --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.spinner import Spinner

from .models import ExportSummary


class OutputHandler:
    """Handles all terminal output using Rich library.

    Provides methods for displaying messages, spinners, and export
    summaries with color coding and verbosity level control.

    Attributes:
        verbosity: Logging verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Export completed")
        >>> with handler.spinner("Converting materials..."):
        ...     # Do work
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
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

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Args:
            message: Message to display with spinner

        Yields:
            None
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    def print_export_summary(self, summary: ExportSummary) -> None:
        """Display export summary with color coding.

        Args:
            summary: Counts and diagnostics of the finished export
        """
        self.console.print("\n[bold]Export Summary:[/bold]")
        self.console.print(f"  [green]■[/green] Materials: {summary.material_count}")

        if summary.plugin_content_count > 0:
            self.console.print(
                f"  [blue]◆[/blue] Plugin content inlined: {summary.plugin_content_count}"
            )

        if summary.diagnostics:
            self.console.print(
                f"  [yellow]⚠[/yellow] Payload errors: {len(summary.diagnostics)}"
            )

        if summary.material_count == 0:
            self.console.print("\n[yellow]No materials to export[/yellow]")
        elif summary.dry_run:
            self.console.print(
                f"\n[green]Dry run complete, nothing written to {escape(summary.output_path)}[/green]"
            )
        else:
            self.console.print("\n[green]Export completed successfully[/green]")
