"""normalize subpackage: the pure transformations behind the inspector panel.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_node_inspector.normalize import extract_fields, format_path, normalize_node_data

    rows = [{"key": "name", "value": "Ada", "type": "string"}]
    extract_fields(rows)            # {"name": "Ada"}
    normalize_node_data(rows)       # '{\\n  "name": "Ada"\\n}'
    format_path(["users", 0])       # '$["users"][0]'
"""

from __future__ import annotations

from json_node_inspector.normalize.coercion import coerce_text, parse_number
from json_node_inspector.normalize.display import (
    format_number,
    normalize_node_data,
    stringify_scalar,
)
from json_node_inspector.normalize.fields import extract_fields, is_editable
from json_node_inspector.normalize.path import ROOT_MARKER, format_path, format_segment

__all__ = [
    "ROOT_MARKER",
    "coerce_text",
    "extract_fields",
    "format_number",
    "format_path",
    "format_segment",
    "is_editable",
    "normalize_node_data",
    "parse_number",
    "stringify_scalar",
]
