from __future__ import annotations

import sys
from typing import Optional

import typer

from record_tracker.app import run_tracker
from record_tracker.config import get_settings
from record_tracker.reporter import print_settings
from record_tracker.utils.logging import configure_logging

app = typer.Typer(help="Record Tracker CLI.")


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    """
    Start an interactive session when no command is given.
    """
    if ctx.invoked_subcommand is None:
        run(title=None)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    print_settings(get_settings())


@app.command()
def run(
    title: Optional[str] = typer.Option(
        None,
        "--title",
        "-t",
        help="Override the menu title (default from settings).",
    ),
) -> None:
    """
    Run the interactive record tracker until "Exit" is chosen.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    run_tracker(settings=settings, title=title)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
