"""Response interpretation shared by all commands."""

from __future__ import annotations

from typing import Callable, TypeVar

import httpx

from refine_client.client.errors import RefineProtocolError

T = TypeVar("T")


def assure_status_code(response: httpx.Response, expected: int) -> None:
    """Raise unless *response* carries the *expected* status code."""
    if response.status_code != expected:
        raise RefineProtocolError(
            f"Unexpected response: expected status {expected} "
            f"but got {response.status_code}"
        )


def read_body(response: httpx.Response) -> str:
    """Read the complete response body as text.

    Reading to the end also releases the underlying connection.
    """
    response.read()
    return response.text


def interpret(
    response: httpx.Response,
    expected: int,
    parse_body: Callable[[str], T],
) -> T:
    """Check the status code, then decode the body with *parse_body*."""
    assure_status_code(response, expected)
    return parse_body(read_body(response))
