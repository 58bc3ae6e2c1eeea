"""Project-related data models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class ProjectLocation(Protocol):
    """Anything that addresses a project on the server.

    The ID is also present as the ``project`` query parameter of the URL.
    """

    @property
    def id(self) -> str: ...

    @property
    def url(self) -> str: ...


class RefineProject(BaseModel):
    """A project handle as known to the client."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    url: str


class ProjectMetadata(BaseModel):
    """Metadata of a project, as returned by ``get-project-metadata``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str | None = None
    created: datetime | None = None
    modified: datetime | None = None
    creator: str | None = None
    contributors: str | None = None
    subject: str | None = None
    description: str | None = None
    row_count: int | None = Field(default=None, alias="rowCount")
    title: str | None = None
    homepage: str | None = None
    image: str | None = None
    license: str | None = None
    version: str | None = None
    tags: list[str] = Field(default_factory=list)
    custom_metadata: dict[str, Any] = Field(default_factory=dict, alias="customMetadata")
    import_option_metadata: list[dict[str, Any]] = Field(
        default_factory=list, alias="importOptionMetadata",
    )
