"""Shared CLI options and enums for commands."""

from enum import StrEnum
from typing import Annotated

import typer


class OutputFormat(StrEnum):
    """Supported output formats."""

    VERBOSE = "verbose"
    TABLE = "table"
    JSON = "json"
    CSV = "csv"


OUTPUT_FORMAT_OPTION = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
]

TABLE_OPTION = Annotated[bool, typer.Option("--table", "-b", help="Tabular output")]
JSON_OPTION = Annotated[bool, typer.Option("--json", "-j", help="Output JSON data")]
CSV_OPTION = Annotated[bool, typer.Option("--csv", "-c", help="Output comma separated values")]
VERBOSE_OPTION = Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output (default)")]

EVENT_TYPE_OPTION = Annotated[
    str | None,
    typer.Option(
        "--type",
        "-t",
        help="Filter activities by event type (see --list)",
    ),
]

USER_OPTION = Annotated[
    bool,
    typer.Option(
        "--user",
        "-u",
        help="Output account information and exit",
    ),
]

DEBUG_OPTION = Annotated[
    bool,
    typer.Option(
        "--debug",
        "-d",
        help="Show request and response headers",
    ),
]

NOCACHE_OPTION = Annotated[
    bool,
    typer.Option(
        "--nocache",
        help="Don't use cached responses; without an account, remove the cache directory and exit",
    ),
]


def resolve_output_format(
    output_format: OutputFormat,
    table: bool = False,
    json: bool = False,
    csv: bool = False,
    verbose: bool = False,
) -> OutputFormat:
    """Apply the shortcut flags on top of ``--format``.

    Args:
        output_format: Value of ``--format``
        table: ``--table`` given
        json: ``--json`` given
        csv: ``--csv`` given
        verbose: ``--verbose`` given

    Returns:
        The effective output format
    """
    if json:
        return OutputFormat.JSON
    if csv:
        return OutputFormat.CSV
    if table:
        return OutputFormat.TABLE
    if verbose:
        return OutputFormat.VERBOSE
    return output_format
