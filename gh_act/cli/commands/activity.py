"""Show a GitHub account's recent public activity."""

import logging
from typing import Annotated

import typer

from gh_act.api.client import GitHubClient
from gh_act.cache import ResponseCache
from gh_act.cli.utils.auth import with_auth_token
from gh_act.cli.utils.options import (
    CSV_OPTION,
    DEBUG_OPTION,
    EVENT_TYPE_OPTION,
    JSON_OPTION,
    NOCACHE_OPTION,
    OUTPUT_FORMAT_OPTION,
    TABLE_OPTION,
    USER_OPTION,
    VERBOSE_OPTION,
    OutputFormat,
    resolve_output_format,
)
from gh_act.cli.utils.output import console, fail, render_event_catalog, render_events, render_identity
from gh_act.config import load_config
from gh_act.core.constants import CMD_VERSION
from gh_act.core.events import is_known_event_type
from gh_act.exceptions import CacheError, GhActError, UnknownEventTypeError
from gh_act.services.pipeline import FetchPipeline

logger = logging.getLogger(__name__)


def _list_callback(value: bool) -> None:
    if value:
        render_event_catalog()
        raise typer.Exit()


def _version_callback(value: bool) -> None:
    if value:
        console.print(CMD_VERSION)
        raise typer.Exit()


def show_activity(
    account: Annotated[
        str | None,
        typer.Argument(help="GitHub user or organization name", show_default=False),
    ] = None,
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.VERBOSE,
    table: TABLE_OPTION = False,
    json: JSON_OPTION = False,
    csv: CSV_OPTION = False,
    verbose: VERBOSE_OPTION = False,
    event_type: EVENT_TYPE_OPTION = None,
    user: USER_OPTION = False,
    debug: DEBUG_OPTION = False,
    nocache: NOCACHE_OPTION = False,
    list_events: Annotated[
        bool,
        typer.Option("--list", help="List GitHub event types and exit", is_eager=True, callback=_list_callback),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", help="Output version information and exit", is_eager=True, callback=_version_callback
        ),
    ] = False,
) -> None:
    """Use the GitHub API to fetch an account's recent activity and display it in the terminal.

    Writing your GitHub token to the file '.auth-token' in the working directory
    (or setting GH_ACT_TOKEN) is recommended for normal operation and required
    when GH_ACT_TEST is set.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    config = with_auth_token(load_config(debug=debug or None, cache_enabled=False if nocache else None))

    if nocache and account is None:
        try:
            ResponseCache(config.cache_dir).purge_all()
        except CacheError as e:
            fail(e.message)
        raise typer.Exit()

    if account is None:
        fail("no GitHub user given")
    if event_type and not is_known_event_type(event_type):
        fail(UnknownEventTypeError(event_type).message, hint="--list")

    fmt = resolve_output_format(output_format, table=table, json=json, csv=csv, verbose=verbose)

    try:
        with GitHubClient(config) as client:
            pipeline = FetchPipeline(config, client)
            if user:
                render_identity(pipeline.resolve_identity(account), fmt)
                return
            feed = pipeline.run(account)
    except GhActError as e:
        logger.debug(f"{type(e).__name__}: {e.details}")
        fail(e.message)

    render_events(account, feed.filter_by_type(event_type), fmt)
