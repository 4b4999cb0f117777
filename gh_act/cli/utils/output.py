"""Shared output handlers for CLI commands."""

import csv
import io
import json
from collections.abc import Callable, Sequence
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.table import Table

from gh_act.cli.utils.options import OutputFormat
from gh_act.core.constants import CMD, FormattingConstants
from gh_act.core.events import EVENT_DESCRIPTIONS
from gh_act.models.event import ActivityEvent
from gh_act.models.identity import Identity

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

IDENTITY_FIELDS = ("login", "name", "type", "html_url", "public_repos", "followers", "created_at")


def fail(message: str, hint: str = "--help") -> NoReturn:
    """Print a two-line error on stderr and exit with status 1."""
    err_console.print(f"{CMD}: {message}", markup=False)
    err_console.print(f"Try '{CMD} {hint}' for more information.", markup=False)
    raise typer.Exit(1)


def handle_json_output(data: Any) -> None:
    """Handle JSON format output.

    Args:
        data: Data to output
    """
    print(json.dumps(data, indent=FormattingConstants.JSON_INDENT, default=str))


def handle_csv_output(
    data: Any,
    row_transformer: Callable[[Any], dict[str, Any]] | None = None,
) -> None:
    """Handle CSV format output.

    Args:
        data: Data to output (list of items or single item)
        row_transformer: Optional function to transform each row before writing
    """
    items = data if isinstance(data, list) else [data]
    rows = [row_transformer(item) if row_transformer else item for item in items]

    string_buffer = io.StringIO()
    if rows:
        # Header order follows the first row; later rows may only add keys
        fieldnames = list(rows[0].keys())
        for row in rows[1:]:
            fieldnames.extend(key for key in row if key not in fieldnames)

        writer = csv.DictWriter(string_buffer, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow({key: _csv_value(value) for key, value in row.items()})

    print(string_buffer.getvalue(), end="")


def _csv_value(value: Any) -> str:
    if isinstance(value, dict | list):
        return json.dumps(value, default=str)
    return "" if value is None else str(value)


def render_event_catalog() -> None:
    """Print every known event type with its description."""
    for event_type, description in EVENT_DESCRIPTIONS.items():
        label = f"{event_type} ".ljust(FormattingConstants.LIST_PAD_WIDTH, ".")
        console.print(f"{label}.... {description}", markup=False)


def render_events(account_name: str, events: Sequence[ActivityEvent], output_format: OutputFormat) -> None:
    """Print an activity feed in the requested format.

    An empty feed prints an explicit "no activity" line for the human
    formats and an empty document for json/csv.
    """
    if output_format == OutputFormat.JSON:
        handle_json_output([event.model_dump(by_alias=True) for event in events])
        return
    if output_format == OutputFormat.CSV:
        handle_csv_output(list(events), row_transformer=ActivityEvent.to_row)
        return

    if not events:
        console.print(f"No recent activity for '{account_name}'", markup=False)
        return

    if output_format == OutputFormat.TABLE:
        table = Table(title=f"Recent activity of {account_name}")
        table.add_column("Type", style="cyan", no_wrap=True)
        table.add_column("Created", style="dim", no_wrap=True)
        table.add_column("Repository", style="green")
        for event in events:
            table.add_row(event.type, event.created_at or "", event.repo_name)
        console.print(table)
        return

    for event in events:
        console.print(f"- {event.phrase or event.type}", markup=False)


def render_identity(identity: Identity, output_format: OutputFormat) -> None:
    """Print the resolved account information."""
    if output_format == OutputFormat.JSON:
        handle_json_output(identity.payload)
        return
    if output_format == OutputFormat.CSV:
        handle_csv_output(identity.payload)
        return

    table = Table(title=f"{identity.kind} {identity.account_name}", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    for field in IDENTITY_FIELDS:
        value = identity.payload.get(field)
        if value is not None:
            table.add_row(field, str(value))
    table.add_row("events_url", identity.feed_url)
    console.print(table)
