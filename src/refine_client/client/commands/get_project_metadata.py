"""Retrieve project metadata."""

from __future__ import annotations

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
from refine_client.client.json_parser import read_model
from refine_client.config.constants import GET_PROJECT_METADATA_PATH
from refine_client.models.project import ProjectMetadata
from refine_client.models.responses import GetProjectMetadataResponse

if TYPE_CHECKING:
    from refine_client.client.refine import RefineClient


@dataclass(frozen=True)
class GetProjectMetadataCommand(JsonCommand[GetProjectMetadataResponse]):
    project_id: str

    def build_request(self, client: RefineClient) -> httpx.Request:
        return httpx.Request(
            "GET",
            client.create_url(GET_PROJECT_METADATA_PATH),
            params={"project": self.project_id},
            headers=ACCEPT_JSON,
        )

    def parse_response(self, body: str) -> GetProjectMetadataResponse:
        return GetProjectMetadataResponse(metadata=read_model(body, ProjectMetadata))


class GetProjectMetadataBuilder:
    """Fluent builder for :class:`GetProjectMetadataCommand`."""

    def __init__(self) -> None:
        self._project_id: str | None = None

    def project(self, project: ProjectRef) -> GetProjectMetadataBuilder:
        self._project_id = project_id_of(project)
        return self

    def build(self) -> GetProjectMetadataCommand:
        return GetProjectMetadataCommand(project_id=require_text(self._project_id, "project_id"))
