"""CLI utilities module."""

from gh_act.cli.utils.auth import get_auth_token, with_auth_token
from gh_act.cli.utils.options import (
    DEBUG_OPTION,
    EVENT_TYPE_OPTION,
    NOCACHE_OPTION,
    OUTPUT_FORMAT_OPTION,
    USER_OPTION,
    OutputFormat,
    resolve_output_format,
)
from gh_act.cli.utils.output import fail, handle_csv_output, handle_json_output, render_events, render_identity

__all__ = [
    "DEBUG_OPTION",
    "EVENT_TYPE_OPTION",
    "NOCACHE_OPTION",
    "OUTPUT_FORMAT_OPTION",
    "USER_OPTION",
    "OutputFormat",
    "fail",
    "get_auth_token",
    "handle_csv_output",
    "handle_json_output",
    "render_events",
    "render_identity",
    "resolve_output_format",
    "with_auth_token",
]
