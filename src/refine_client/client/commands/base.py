"""Shared command plumbing: request/response contract and builder checks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar, Union

import httpx

from refine_client.client.errors import CommandValidationError
from refine_client.client.http_parser import interpret
from refine_client.models.project import ProjectLocation, RefineProject

if TYPE_CHECKING:
    from refine_client.client.refine import RefineClient

T = TypeVar("T")

ACCEPT_JSON = {"Accept": "application/json"}

ProjectRef = Union[str, ProjectLocation, RefineProject]


class RefineCommand(ABC, Generic[T]):
    """A remote operation that builds its request and interprets the response."""

    expected_status: ClassVar[int]

    def execute(self, client: RefineClient) -> T:
        """Run the command through *client*.

        Raises:
            RefineConnectionError: the exchange with the server failed.
            RefineProtocolError: the response is not what the command expects.
        """
        return client.execute(self.build_request(client), self.handle_response)

    @abstractmethod
    def build_request(self, client: RefineClient) -> httpx.Request: ...

    @abstractmethod
    def handle_response(self, response: httpx.Response) -> T: ...


class JsonCommand(RefineCommand[T]):
    """A command answered with 200 and a JSON body."""

    expected_status: ClassVar[int] = 200

    def handle_response(self, response: httpx.Response) -> T:
        return interpret(response, self.expected_status, self.parse_response)

    @abstractmethod
    def parse_response(self, body: str) -> T: ...


def project_id_of(project: ProjectRef | None) -> str:
    """Extract the project ID from an ID, a location or a project handle."""
    if project is None:
        raise CommandValidationError("project is required")
    if isinstance(project, str):
        return project
    return project.id


def require_text(value: str | None, name: str) -> str:
    if value is None:
        raise CommandValidationError(f"{name} is required")
    if not value:
        raise CommandValidationError(f"{name} is empty")
    return value


def require_elements(
    values: Sequence[T] | None, name: str, kind: type | None = None,
) -> tuple[T, ...]:
    if values is None:
        raise CommandValidationError(f"{name} is required")
    if not values:
        raise CommandValidationError(f"{name} is empty")
    if any(value is None for value in values):
        raise CommandValidationError(f"{name} contains null")
    if kind is not None and not all(isinstance(value, kind) for value in values):
        raise CommandValidationError(f"{name} contains a value that is not an {kind.__name__}")
    return tuple(values)
