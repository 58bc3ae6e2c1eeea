"""JSON decoding helpers that surface failures as protocol errors."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from refine_client.client.errors import RefineProtocolError

M = TypeVar("M", bound=BaseModel)


def parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise RefineProtocolError(f"Response body is not valid JSON: {exc}") from exc


def find_existing_path(node: Any, path: str) -> Any:
    """Return ``node[path]``, raising if the field is absent."""
    if not isinstance(node, dict) or path not in node:
        raise RefineProtocolError(f"Path '{path}' not found in response")
    return node[path]


def find_text(node: Any, path: str) -> str:
    """Return the string at ``node[path]``, raising if absent or not a string."""
    value = find_existing_path(node, path)
    if not isinstance(value, str):
        raise RefineProtocolError(f"Path '{path}' is not a string in response")
    return value


def read_model(text: str, model: type[M]) -> M:
    """Deserialize *text* directly into *model*."""
    try:
        return model.model_validate_json(text)
    except ValidationError as exc:
        raise RefineProtocolError(
            f"Cannot read {model.__name__} from response: {exc}"
        ) from exc
