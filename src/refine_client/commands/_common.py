"""Shared helpers for CLI commands: client factory and options."""

from __future__ import annotations

from typing import Annotated

import typer

from refine_client.client.refine import RefineClient
from refine_client.config.manager import ConfigManager

# Shared Typer option type aliases
ServerOpt = Annotated[
    str | None,
    typer.Option("--server", "-s", help="Server profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="Server URL override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml)"),
]


def make_client(server: str | None, url: str | None) -> RefineClient:
    """Create a RefineClient from CLI options, env vars, or config profile."""
    profile = ConfigManager().resolve_server(profile_name=server, url=url)
    return RefineClient(profile)
