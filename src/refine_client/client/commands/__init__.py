"""The remote commands, each created through a validating builder.

Example::

    command = apply_operations().project("1234").operations(*ops).build()
    response = command.execute(client)
"""

from refine_client.client.commands.apply_operations import (
    ApplyOperationsBuilder,
    ApplyOperationsCommand,
)
from refine_client.client.commands.base import JsonCommand, RefineCommand
from refine_client.client.commands.create_project import (
    CreateProjectBuilder,
    CreateProjectCommand,
)
from refine_client.client.commands.delete_project import (
    DeleteProjectBuilder,
    DeleteProjectCommand,
)
from refine_client.client.commands.get_project_metadata import (
    GetProjectMetadataBuilder,
    GetProjectMetadataCommand,
)


def create_project() -> CreateProjectBuilder:
    return CreateProjectBuilder()


def delete_project() -> DeleteProjectBuilder:
    return DeleteProjectBuilder()


def apply_operations() -> ApplyOperationsBuilder:
    return ApplyOperationsBuilder()


def get_project_metadata() -> GetProjectMetadataBuilder:
    return GetProjectMetadataBuilder()


__all__ = [
    "ApplyOperationsBuilder",
    "ApplyOperationsCommand",
    "CreateProjectBuilder",
    "CreateProjectCommand",
    "DeleteProjectBuilder",
    "DeleteProjectCommand",
    "GetProjectMetadataBuilder",
    "GetProjectMetadataCommand",
    "JsonCommand",
    "RefineCommand",
    "apply_operations",
    "create_project",
    "delete_project",
    "get_project_metadata",
]
