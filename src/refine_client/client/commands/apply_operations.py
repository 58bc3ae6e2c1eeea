"""Apply a batch of operations to a project."""

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
    require_elements,
    require_text,
)
from refine_client.client.errors import RefineProtocolError
from refine_client.client.json_parser import find_existing_path, find_text, parse_json
from refine_client.config.constants import APPLY_OPERATIONS_PATH
from refine_client.models.operation import Operation
from refine_client.models.responses import ApplyOperationsResponse

if TYPE_CHECKING:
    from refine_client.client.refine import RefineClient

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApplyOperationsCommand(JsonCommand[ApplyOperationsResponse]):
    """POSTs ``project`` and ``operations`` to ``apply-operations``.

    The server applies the operations in the given order.
    """

    project_id: str
    operations: tuple[Operation, ...]

    def operations_json(self) -> str:
        """The operations as a JSON array, each fragment kept exactly as rendered."""
        return "[" + ",".join(operation.as_json() for operation in self.operations) + "]"

    def build_request(self, client: RefineClient) -> httpx.Request:
        log.debug(
            "refine.apply_operations",
            extra={"project": self.project_id, "operations": len(self.operations)},
        )
        return httpx.Request(
            "POST",
            client.create_url(APPLY_OPERATIONS_PATH),
            data={"project": self.project_id, "operations": self.operations_json()},
            headers=ACCEPT_JSON,
        )

    def parse_response(self, body: str) -> ApplyOperationsResponse:
        return self.parse_apply_operations_response(body)

    def parse_apply_operations_response(self, body: str) -> ApplyOperationsResponse:
        node = parse_json(body)
        code = find_existing_path(node, "code")
        if code == "ok":
            return ApplyOperationsResponse.ok()
        if code == "pending":
            return ApplyOperationsResponse.pending()
        if code == "error":
            return ApplyOperationsResponse.error(find_text(node, "message"))
        raise RefineProtocolError(f"Unexpected code: {code}")


class ApplyOperationsBuilder:
    """Fluent builder for :class:`ApplyOperationsCommand`."""

    def __init__(self) -> None:
        self._project_id: str | None = None
        self._operations: tuple[Operation, ...] | None = None

    def project(self, project: ProjectRef) -> ApplyOperationsBuilder:
        self._project_id = project_id_of(project)
        return self

    def operations(self, *operations: Operation) -> ApplyOperationsBuilder:
        self._operations = operations
        return self

    def build(self) -> ApplyOperationsCommand:
        return ApplyOperationsCommand(
            project_id=require_text(self._project_id, "project_id"),
            operations=require_elements(self._operations, "operations", Operation),
        )
