"""Data models for the OpenRefine command API."""

from refine_client.models.operation import JsonOperation, Operation, load_operations
from refine_client.models.project import ProjectLocation, ProjectMetadata, RefineProject
from refine_client.models.responses import (
    ApplyOperationsResponse,
    CreateProjectResponse,
    DeleteProjectResponse,
    GetProjectMetadataResponse,
    ResponseCode,
)
from refine_client.models.upload import UploadFormat, UploadOptions

__all__ = [
    "ApplyOperationsResponse",
    "CreateProjectResponse",
    "DeleteProjectResponse",
    "GetProjectMetadataResponse",
    "JsonOperation",
    "Operation",
    "ProjectLocation",
    "ProjectMetadata",
    "RefineProject",
    "ResponseCode",
    "UploadFormat",
    "UploadOptions",
    "load_operations",
]
