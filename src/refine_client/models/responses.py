"""Typed results of the remote commands."""

from __future__ import annotations

from enum import Enum

import httpx
from pydantic import BaseModel, ConfigDict

from refine_client.models.project import ProjectMetadata


class ResponseCode(str, Enum):
    """Application-level status reported in a command's JSON body."""

    OK = "ok"
    PENDING = "pending"
    ERROR = "error"


class _Response(BaseModel):
    model_config = ConfigDict(frozen=True)


class ApplyOperationsResponse(_Response):
    """Outcome of ``apply-operations``: ok, pending or error with a message."""

    code: ResponseCode
    message: str | None = None

    @classmethod
    def ok(cls) -> ApplyOperationsResponse:
        return cls(code=ResponseCode.OK)

    @classmethod
    def pending(cls) -> ApplyOperationsResponse:
        return cls(code=ResponseCode.PENDING)

    @classmethod
    def error(cls, message: str) -> ApplyOperationsResponse:
        return cls(code=ResponseCode.ERROR, message=message)


class DeleteProjectResponse(_Response):
    """Outcome of ``delete-project``: ok or error with a message."""

    code: ResponseCode
    message: str | None = None

    @classmethod
    def ok(cls) -> DeleteProjectResponse:
        return cls(code=ResponseCode.OK)

    @classmethod
    def error(cls, message: str) -> DeleteProjectResponse:
        return cls(code=ResponseCode.ERROR, message=message)


class CreateProjectResponse(_Response):
    """Location of a newly created project."""

    url: str

    @property
    def id(self) -> str:
        """The ``project`` query parameter of the location."""
        return httpx.URL(self.url).params.get("project", "")


class GetProjectMetadataResponse(_Response):
    """Metadata of a single project."""

    metadata: ProjectMetadata
