"""Public API functions for json-node-inspector.

This module provides the stateless functions a presentation shell calls to
fill its read-only widgets: is_editable, get_display_text and get_path_text.
Each call is a pure function of its arguments; the stateful counterpart is
``EditSession``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from json_node_inspector.config import InspectorConfig
from json_node_inspector.normalize.display import normalize_node_data
from json_node_inspector.normalize.fields import is_editable as _is_editable
from json_node_inspector.normalize.path import format_path
from json_node_inspector.tree.nodes import PathSegment, Row

__all__ = ["get_display_text", "get_path_text", "is_editable"]


def is_editable(rows: Iterable[Row | Mapping[str, Any]] | None) -> bool:
    """Return True if the node has at least one scalar row.

    Args:
        rows: The node's rows (Row objects or plain mappings).

    Returns:
        Whether the presentation shell should offer an "Edit" action.
    """
    return _is_editable(rows)


def get_display_text(
    rows: Iterable[Row | Mapping[str, Any]] | None,
    config: InspectorConfig | None = None,
) -> str:
    """Return the read-only display text for a node.

    Args:
        rows:   The node's rows.
        config: Presentation settings.  Defaults to ``InspectorConfig()`` when None.

    Returns:
        ``"{}"`` for no rows, the bare value for a single keyless row, or the
        node's scalar fields as indented JSON.
    """
    config = config if config is not None else InspectorConfig()
    return normalize_node_data(rows, indent=config.indent)


def get_path_text(
    path: Sequence[PathSegment] | None,
    config: InspectorConfig | None = None,
) -> str:
    """Return the bracket-path text for a node.

    Args:
        path:   The node's path segments; None or empty for the root.
        config: Presentation settings.  Defaults to ``InspectorConfig()`` when None.

    Returns:
        ``"$"`` or ``$[seg1][seg2]...``.
    """
    config = config if config is not None else InspectorConfig()
    return format_path(path, escape_quotes=config.escape_path_quotes)
