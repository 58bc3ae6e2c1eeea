"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class RefineClientError(Exception):
    """Base exception for refine-client."""

    exit_code: int = 1


class RefineConnectionError(RefineClientError):
    """The request could not be exchanged with the server."""

    exit_code = 2


class RefineProtocolError(RefineClientError):
    """The server answered, but not in the shape the command expects."""

    exit_code = 3


class ConfigurationError(RefineClientError):
    """No usable server configuration."""

    exit_code = 4


class CommandValidationError(RefineClientError, ValueError):
    """A command builder was given missing or empty parameters."""

    exit_code = 5

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Invalid command parameters")


def error_handler(func: F) -> F:
    """Decorator that catches RefineClientError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except RefineClientError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
