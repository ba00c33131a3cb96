"""Rich-based UI implementation for branch-helper."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from branch_helper.models.status import WorkingTreeStatus


class RichUI:
    """Rich-based UI implementation."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize Rich UI."""
        self.console = console or Console()

    def print_info(self, message: str) -> None:
        """Print an info message."""
        self.console.print(message)

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[red]Error:[/red] {message}")

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        self.console.print(f"[yellow]{message}[/yellow]")

    def print_cyan(self, message: str) -> None:
        """Print a cyan-colored message."""
        self.console.print(f"[cyan]{message}[/cyan]")

    def print_status(self, status: WorkingTreeStatus, unknown_branch: str) -> None:
        """Print the working tree status as a table of changed paths."""
        branch = escape(status.current or unknown_branch)
        if status.tracking:
            branch = f"{branch} → {escape(status.tracking)} (ahead {status.ahead}, behind {status.behind})"
        self.console.print(f"[bold]On branch:[/bold] {branch}")

        if status.is_clean:
            self.print_success("Git working directory is clean")
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Change", style="bold")
        table.add_column("Path", style="cyan")
        for label, style, paths in (
            ("staged", "green", status.staged),
            ("unstaged", "yellow", status.unstaged),
            ("untracked", "red", status.untracked),
        ):
            for path in paths:
                table.add_row(f"[{style}]{label}[/{style}]", escape(path))

        self.console.print(table)
        self.print_warning("Git working directory is not clean")
