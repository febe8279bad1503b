"""Output formatting utilities for the CLI."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from rich.console import Console
from rich.table import Table as RichTable
from rich.theme import Theme

from s3t.core.models import ProvisionResult, Table

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)
err_console = Console(theme=_THEME, stderr=True)

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _fmt_time(value: datetime | None) -> str:
    """Render a timestamp as `YYYY-MM-DD HH:MM:SS` (empty when unknown)."""
    if value is None:
        return ""
    return value.strftime(_TIME_FORMAT)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    @contextmanager
    def status(self, msg: str):
        """Show a transient status spinner while work is in progress."""
        with console.status(msg, spinner="dots"):
            yield

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[ok]✓[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        err_console.print(f"[err]✗[/] {msg}")

    def hint(self, msg: str) -> None:
        """Print a follow-up hint under an error."""
        err_console.print(f"  [meta]hint:[/] {msg}")

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{title}[/]")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs with aligned keys."""
        width = max((len(k) for k in items), default=0)
        for k, v in items.items():
            console.print(f"  [meta]{(k + ':').ljust(width + 1)}[/] {v}")

    def provision_summary(self, result: ProvisionResult) -> None:
        """
        Render the outcome of a `create` run.

        Counts come from the `*_created` flags only; ARNs are shown for
        both new and pre-existing resources.
        """
        console.print()
        self.header("=== S3 Tables Resource Creation Summary ===")
        console.print()

        t = RichTable(show_header=False, box=None, padding=(0, 1))
        t.add_column("", no_wrap=True)
        t.add_column("")
        for msg in result.messages:
            style = "ok" if msg.endswith("created") else "meta"
            t.add_row("•", f"[{style}]{msg}[/]")
        console.print(t)
        console.print()

        if result.created_count:
            console.print(f"Created: {result.created_count} resource(s)")
        if result.existed_count:
            console.print(f"Already existed: {result.existed_count} resource(s)")

        if result.table_bucket_arn:
            console.print(f"\n[meta]Table Bucket ARN:[/] {result.table_bucket_arn}")
        if result.table_arn:
            console.print(f"[meta]Table ARN:[/] {result.table_arn}")

    def table_details(self, table: Table) -> None:
        """Render the full detail record of a single table."""
        console.print()
        self.header("Table Details:")
        details: dict[str, Any] = {
            "Name": table.name,
            "Namespace": table.namespace,
            "ARN": table.arn,
            "Type": table.table_type or "",
        }
        if table.format:
            details["Format"] = table.format
        details["Created"] = _fmt_time(table.created_at)
        if table.modified_at:
            details["Modified"] = _fmt_time(table.modified_at)
        if table.warehouse_location:
            details["Warehouse"] = table.warehouse_location
        self.kv(details)
        console.print()


out = Out()
