"""Delete a project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from refine_client.client.commands.base import (
    ACCEPT_JSON,
    JsonCommand,
    ProjectRef,
    project_id_of,
    require_text,
)
from refine_client.client.errors import RefineProtocolError
from refine_client.client.json_parser import find_existing_path, find_text, parse_json
from refine_client.config.constants import DELETE_PROJECT_PATH
from refine_client.models.responses import DeleteProjectResponse

if TYPE_CHECKING:
    from refine_client.client.refine import RefineClient

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteProjectCommand(JsonCommand[DeleteProjectResponse]):
    """POSTs ``project`` to ``delete-project``."""

    project_id: str

    def build_request(self, client: RefineClient) -> httpx.Request:
        return httpx.Request(
            "POST",
            client.create_url(DELETE_PROJECT_PATH),
            data={"project": self.project_id},
            headers=ACCEPT_JSON,
        )

    def parse_response(self, body: str) -> DeleteProjectResponse:
        return self.parse_delete_project_response(body)

    def parse_delete_project_response(self, body: str) -> DeleteProjectResponse:
        node = parse_json(body)
        code = find_existing_path(node, "code")
        log.debug("refine.delete_project", extra={"project": self.project_id, "code": code})
        if code == "ok":
            return DeleteProjectResponse.ok()
        if code == "error":
            return DeleteProjectResponse.error(find_text(node, "message"))
        raise RefineProtocolError(f"Unexpected code: {code}")


class DeleteProjectBuilder:
    """Fluent builder for :class:`DeleteProjectCommand`."""

    def __init__(self) -> None:
        self._project_id: str | None = None

    def project(self, project: ProjectRef) -> DeleteProjectBuilder:
        self._project_id = project_id_of(project)
        return self

    def build(self) -> DeleteProjectCommand:
        return DeleteProjectCommand(project_id=require_text(self._project_id, "project_id"))
