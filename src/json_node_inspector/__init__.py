"""JSON node inspector - view and edit the scalar fields of one document node."""

from __future__ import annotations

from json_node_inspector.api import get_display_text, get_path_text, is_editable
from json_node_inspector.config import InspectorConfig
from json_node_inspector.exceptions import (
    EditStateError,
    InspectorError,
    InvalidFieldError,
    NoPathError,
)
from json_node_inspector.normalize import (
    coerce_text,
    extract_fields,
    format_path,
    normalize_node_data,
)
from json_node_inspector.patch import Patch
from json_node_inspector.protocols import DocumentStore
from json_node_inspector.session import EditMode, EditSession
from json_node_inspector.store import InMemoryDocumentStore
from json_node_inspector.tree import Row, RowType, SelectedNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "DocumentStore",
    "EditMode",
    "EditSession",
    "EditStateError",
    "InMemoryDocumentStore",
    "InspectorConfig",
    "InspectorError",
    "InvalidFieldError",
    "NoPathError",
    "Patch",
    "Row",
    "RowType",
    "SelectedNode",
    "coerce_text",
    "extract_fields",
    "format_path",
    "get_display_text",
    "get_path_text",
    "is_editable",
    "normalize_node_data",
]
