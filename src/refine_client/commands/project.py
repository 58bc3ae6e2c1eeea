"""Project commands.

create, delete, apply, metadata.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from refine_client.client import commands as refine_commands
from refine_client.client.errors import CommandValidationError, error_handler
from refine_client.commands._common import FormatOpt, ServerOpt, UrlOpt, make_client
from refine_client.models.operation import load_operations
from refine_client.models.responses import ResponseCode
from refine_client.output.formatter import output

app = typer.Typer(name="project", help="Manage OpenRefine projects.")
console = Console()


@app.command()
@error_handler
def create(
    name: Annotated[str, typer.Argument(help="Project name")],
    file: Annotated[Path, typer.Argument(help="Data file to upload")],
    upload_format: Annotated[
        Optional[str],
        typer.Option("--format", help="Importer format, e.g. text/line-based/*sv"),
    ] = None,
    options: Annotated[
        Optional[str],
        typer.Option("--options", help="Importer options as a JSON object"),
    ] = None,
    server: ServerOpt = None,
    url: UrlOpt = None,
) -> None:
    """Create a project from a data file."""
    parsed_options = None
    if options:
        try:
            parsed_options = json.loads(options)
        except json.JSONDecodeError as exc:
            raise CommandValidationError(f"--options is not valid JSON: {exc}") from exc
        if not isinstance(parsed_options, dict):
            raise CommandValidationError("--options must be a JSON object")
    command = (
        refine_commands.create_project()
        .name(name)
        .file(file)
        .format(upload_format)
        .options(parsed_options)
        .build()
    )
    with make_client(server, url) as client:
        result = command.execute(client)
    console.print(f"[green]Project '{name}' created[/] with id [bold]{result.id}[/].")
    console.print(result.url)


@app.command()
@error_handler
def delete(
    project_id: Annotated[str, typer.Argument(help="Project ID")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    server: ServerOpt = None,
    url: UrlOpt = None,
) -> None:
    """Delete a project."""
    command = refine_commands.delete_project().project(project_id).build()
    if not force:
        from rich.prompt import Confirm

        if not Confirm.ask(f"Delete project '{project_id}'? This cannot be undone"):
            console.print("Cancelled.")
            return
    with make_client(server, url) as client:
        result = command.execute(client)
    if result.code is ResponseCode.ERROR:
        console.print(f"[red]Server refused to delete project '{project_id}':[/] {result.message}")
        raise typer.Exit(1)
    console.print(f"[green]Project '{project_id}' deleted.[/]")


@app.command()
@error_handler
def apply(
    project_id: Annotated[str, typer.Argument(help="Project ID")],
    operations_file: Annotated[
        Path,
        typer.Argument(help="Operation history JSON file", exists=True, dir_okay=False),
    ],
    server: ServerOpt = None,
    url: UrlOpt = None,
) -> None:
    """Apply an exported operation history to a project."""
    operations = load_operations(operations_file)
    command = (
        refine_commands.apply_operations()
        .project(project_id)
        .operations(*operations)
        .build()
    )
    with make_client(server, url) as client:
        result = command.execute(client)
    if result.code is ResponseCode.ERROR:
        console.print(f"[red]Operations failed:[/] {result.message}")
        raise typer.Exit(1)
    if result.code is ResponseCode.PENDING:
        console.print(f"[yellow]{len(operations)} operation(s) queued on project '{project_id}'.[/]")
        return
    console.print(f"[green]{len(operations)} operation(s) applied to project '{project_id}'.[/]")


@app.command()
@error_handler
def metadata(
    project_id: Annotated[str, typer.Argument(help="Project ID")],
    server: ServerOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show project metadata."""
    command = refine_commands.get_project_metadata().project(project_id).build()
    with make_client(server, url) as client:
        result = command.execute(client)
    output(result.metadata, fmt, title=f"Project: {project_id}")
