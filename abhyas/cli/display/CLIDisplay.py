"""CLI display implementation using Rich library."""

import json
import sys
from collections.abc import Sequence
from datetime import datetime
from typing import Any

import yaml
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...api.link.Link import Link
from ...api.link.StatusCounts import StatusCounts
from ...constants import DEFAULT_TIMESTAMP_FORMAT


class CLIDisplay:
    """Terminal display for commands and the interactive session."""

    def __init__(self, console: Console | None = None, stderr_console: Console | None = None):
        self.console = console or Console(file=sys.stdout)
        self.stderr_console = stderr_console or Console(file=sys.stderr)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime(DEFAULT_TIMESTAMP_FORMAT)

    def status(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {message}")

    def success(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {message}")

    def error(self, message: str, details: str = "") -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {message}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def warning(self, message: str) -> None:
        self.stderr_console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str) -> None:
        self.stderr_console.print(message)

    # Interactive output goes to stdout next to the prompts

    def message(self, message: str, style: str = "green") -> None:
        self.console.print(message, style=style, markup=False)

    def links_table(self, links: Sequence[Link]) -> None:
        """Render links as a numbered table."""
        table = Table(box=box.ROUNDED)
        table.add_column("id", justify="right")
        table.add_column("link", overflow="fold")
        table.add_column("solved_count", justify="right")
        table.add_column("status")
        for index, link in enumerate(links, start=1):
            table.add_row(str(index), escape(link.url), str(link.solved_count), link.status.value)
        self.console.print(table)

    def status_table(self, counts: StatusCounts) -> None:
        table = Table(box=box.ROUNDED)
        for column in ("total", "completed", "skipped", "incomplete"):
            table.add_column(column, justify="right")
        table.add_row(str(counts.total), str(counts.completed), str(counts.skipped), str(counts.incomplete))
        self.console.print(table)

    def json_output(self, data: Any, format: str = "yaml", indent: int = 2) -> None:
        if format == "yaml":
            print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True), end="")
        else:
            print(json.dumps(data, indent=indent, ensure_ascii=False))
