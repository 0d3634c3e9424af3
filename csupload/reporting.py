"""Console rendering for csupload runs."""
from __future__ import annotations

from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .models import BatchSummary, UploadResult


class ConsoleReporter:
    """Prints one line per event; safe to call from any task on the event loop."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    def _echo(self, message: str) -> None:
        self._console.print(message, markup=False, highlight=False, soft_wrap=True)

    def configuration(self, config: Dict[str, Any]) -> None:
        """Render startup configuration summary."""
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold cyan", justify="right")
        table.add_column(style="white")

        for key, value in config.items():
            rendered = "-" if value is None else str(value)
            table.add_row(key, rendered)

        panel = Panel(
            table,
            title="[bold green]cs-bulk-upload[/bold green]",
            subtitle="[dim]content server bulk upload[/dim]",
            border_style="blue",
        )
        self._console.print(panel)

    def auth(self, error: Optional[str], ticket: str) -> None:
        self._echo(f"Auth: {error}")
        self._echo(f"OTCSTicket: {ticket}")

    def result(self, result: UploadResult) -> None:
        if result.success:
            self._echo(f"Added {result.name}")
        else:
            self._echo(f"Added {result.name}, error = {result.error}")

    def summary(self, summary: BatchSummary) -> None:
        self._echo(
            f"Done: {summary.succeeded}/{summary.total} added, {summary.failed} failed"
        )
