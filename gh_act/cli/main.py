"""Main CLI entry point for gh-act."""

import typer

from gh_act.cli.commands.activity import show_activity

app = typer.Typer(
    name="gh-act",
    help="Fetch the recent activity of a GitHub user or organization and display it in the terminal",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("activity", no_args_is_help=True)(show_activity)


if __name__ == "__main__":
    app()
