"""Output formatting for the suitetrace CLI."""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.table import Table


@dataclass
class OutputContext:
    """Where and how command results are printed."""

    console: Console
    json_mode: bool = False

    def print(self, message: str, style: str | None = None) -> None:
        """Print message unless in JSON mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: Any) -> None:
        """Print JSON data to stdout (only in JSON mode)."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def result(self, data: Any, message: str = "") -> None:
        """JSON in JSON mode, otherwise the message."""
        if self.json_mode:
            self.print_json(data)
        elif message:
            self.console.print(message)

    def table(self, table: Table, data: Any) -> None:
        """Rich table for humans, `data` as JSON for automation."""
        if self.json_mode:
            self.print_json(data)
        else:
            self.console.print(table)

    def error(self, message: str) -> None:
        if self.json_mode:
            self.print_json({"error": message})
        else:
            self.console.print(f"[red]Error: {message}[/red]")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        if self.json_mode:
            self.print_json({"success": message, **(data or {})})
        else:
            self.console.print(f"[green]{message}[/green]")


_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Current output context; a plain one if the CLI callback has not run."""
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    """Set the global output context. Called by the CLI main callback."""
    global _ctx
    _ctx = ctx
