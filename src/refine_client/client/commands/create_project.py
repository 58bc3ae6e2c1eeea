"""Create a project from an uploaded file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, ClassVar

import httpx

from refine_client.client.commands.base import (
    ACCEPT_JSON,
    RefineCommand,
    require_text,
)
from refine_client.client.errors import CommandValidationError, RefineProtocolError
from refine_client.client.http_parser import assure_status_code
from refine_client.config.constants import CREATE_PROJECT_PATH
from refine_client.models.responses import CreateProjectResponse
from refine_client.models.upload import UploadFormat, UploadOptions

if TYPE_CHECKING:
    from refine_client.client.refine import RefineClient

log = logging.getLogger(__name__)

TEXT_PLAIN = "text/plain; charset=UTF-8"
APPLICATION_JSON = "application/json; charset=UTF-8"


@dataclass(frozen=True)
class CreateProjectCommand(RefineCommand[CreateProjectResponse]):
    """Uploads a file as multipart form to ``create-project-from-upload``.

    The server answers with a redirect to the new project.
    """

    expected_status: ClassVar[int] = 302

    name: str
    file: Path
    format: UploadFormat | None = None
    options: UploadOptions | None = None

    def execute(self, client: RefineClient) -> CreateProjectResponse:
        with self.file.open("rb") as upload:
            request = self.build_request(client, upload)
            return client.execute(request, self.handle_response)

    def build_request(
        self, client: RefineClient, upload: IO[bytes] | None = None,
    ) -> httpx.Request:
        params = None
        if self.options is not None:
            # The server ignores the options form field but honors the
            # query parameter, so options are sent both ways.
            params = {"options": self.options.as_json()}
        return httpx.Request(
            "POST",
            client.create_url(CREATE_PROJECT_PATH),
            params=params,
            files=self.multipart_fields(upload),
            headers=ACCEPT_JSON,
        )

    def multipart_fields(self, upload: IO[bytes] | None = None) -> list[tuple[str, Any]]:
        """Multipart parts in wire order: format, options, project-file, project-name."""
        fields: list[tuple[str, Any]] = []
        if self.format is not None:
            fields.append(("format", (None, self.format.value, TEXT_PLAIN)))
        if self.options is not None:
            fields.append(("options", (None, self.options.as_json(), APPLICATION_JSON)))
        content = upload if upload is not None else self.file.read_bytes()
        fields.append(("project-file", (self.file.name, content, "application/octet-stream")))
        fields.append(("project-name", (None, self.name, TEXT_PLAIN)))
        return fields

    def handle_response(self, response: httpx.Response) -> CreateProjectResponse:
        assure_status_code(response, self.expected_status)
        location = response.headers.get("Location")
        if location is None:
            raise RefineProtocolError("No location header found.")
        result = CreateProjectResponse(url=location)
        if not result.id:
            raise RefineProtocolError(f"No project id in location {location}")
        log.debug(
            "refine.create_project",
            extra={"project_name": self.name, "project": result.id},
        )
        return result


class CreateProjectBuilder:
    """Fluent builder for :class:`CreateProjectCommand`."""

    def __init__(self) -> None:
        self._name: str | None = None
        self._file: Path | None = None
        self._format: UploadFormat | None = None
        self._options: UploadOptions | None = None

    def name(self, name: str) -> CreateProjectBuilder:
        self._name = name
        return self

    def file(self, file: Path | str) -> CreateProjectBuilder:
        self._file = Path(file)
        return self

    def format(self, format: UploadFormat | str | None) -> CreateProjectBuilder:
        if format is None or isinstance(format, UploadFormat):
            self._format = format
        else:
            try:
                self._format = UploadFormat(format)
            except ValueError as exc:
                raise CommandValidationError(f"Unknown upload format: {format}") from exc
        return self

    def options(self, options: UploadOptions | dict[str, Any] | None) -> CreateProjectBuilder:
        if isinstance(options, dict):
            options = UploadOptions(options)
        self._options = options
        return self

    def build(self) -> CreateProjectCommand:
        name = require_text(self._name, "name")
        if self._file is None:
            raise CommandValidationError("file is required")
        if not self._file.is_file() or not os.access(self._file, os.R_OK):
            raise CommandValidationError(f"file {self._file} is not a readable file")
        return CreateProjectCommand(
            name=name, file=self._file, format=self._format, options=self._options,
        )
