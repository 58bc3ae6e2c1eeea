"""Root Typer app: global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from refine_client import __version__
from refine_client.commands import config_cmd, project
from refine_client.config.logging import configure_logging

app = typer.Typer(
    name="refine-client",
    help="Client for the OpenRefine command API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"refine-client {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and responses."),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON lines."),
) -> None:
    """OpenRefine client: create, transform, inspect and delete projects."""
    configure_logging(verbose=verbose, log_json=log_json)


app.add_typer(config_cmd.app, name="config")
app.add_typer(project.app, name="project")


def main() -> None:
    app()
