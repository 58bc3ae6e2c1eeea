"""Upload format and options for project creation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class UploadFormat(str, Enum):
    """Importer format identifiers understood by the server."""

    LINE_BASED = "text/line-based"
    SEPARATOR_BASED = "text/line-based/*sv"
    FIXED_WIDTH = "text/line-based/fixed-width"
    PC_AXIS = "text/line-based/pc-axis"
    JSON = "text/json"
    XML = "text/xml"
    EXCEL = "binary/text/xml/xls/xlsx"
    ODS = "text/xml/ods"
    RDF_NT = "text/rdf/nt"
    RDF_N3 = "text/rdf/n3"
    RDF_TTL = "text/rdf/ttl"
    RDF_XML = "text/rdf/xml"
    MARC = "text/marc"
    WIKITEXT = "text/wiki"


@dataclass(frozen=True)
class UploadOptions:
    """Importer options, e.g. ``{"separator": ";", "headerLines": 1}``."""

    options: dict[str, Any] = field(default_factory=dict)

    def as_json(self) -> str:
        return json.dumps(self.options, separators=(",", ":"), ensure_ascii=False)
