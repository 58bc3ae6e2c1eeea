"""Operations applied to a project."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from refine_client.client.errors import CommandValidationError


@runtime_checkable
class Operation(Protocol):
    """A transformation step that renders itself as a JSON fragment."""

    def as_json(self) -> str: ...


@dataclass(frozen=True)
class JsonOperation:
    """An operation backed by pre-formed JSON text, sent verbatim."""

    fragment: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> JsonOperation:
        return cls(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))

    def as_json(self) -> str:
        return self.fragment


def load_operations(path: Path) -> list[JsonOperation]:
    """Load an exported operation history (a JSON array of operations).

    Each element becomes one operation, in file order.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CommandValidationError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise CommandValidationError(f"{path} must contain a JSON array of operations")
    return [JsonOperation.from_payload(item) for item in data]
