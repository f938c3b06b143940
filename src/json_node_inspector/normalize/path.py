"""Bracket-path rendering for a node's structural location.

A path renders as ``$`` followed by one bracketed step per segment::

    format_path(["customer", 0, "name"])   # '$["customer"][0]["name"]'

Numeric segments (array indices) are unquoted; all other segments (object
keys) are double-quoted.  Embedded quotes are interpolated verbatim unless
``escape_quotes`` is requested.
"""

from __future__ import annotations

from collections.abc import Sequence

from json_node_inspector.normalize.display import stringify_scalar
from json_node_inspector.tree.nodes import PathSegment

__all__ = ["ROOT_MARKER", "format_path", "format_segment"]

ROOT_MARKER = "$"


def format_segment(segment: PathSegment, escape_quotes: bool = False) -> str:
    """Render a single path segment without its surrounding brackets."""
    # bool subclasses int but is never an array index
    if isinstance(segment, (int, float)) and not isinstance(segment, bool):
        return stringify_scalar(segment)
    text = str(segment)
    if escape_quotes:
        text = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def format_path(
    path: Sequence[PathSegment] | None = None,
    *,
    escape_quotes: bool = False,
) -> str:
    """Return the canonical bracket-path string for a node.

    Args:
        path:          Ordered path segments.  None or empty means the root.
        escape_quotes: Backslash-escape ``\\`` and ``"`` inside string segments.

    Returns:
        ``"$"`` for the root, otherwise ``$[seg1][seg2]...``.
    """
    if not path:
        return ROOT_MARKER
    steps = "][".join(format_segment(segment, escape_quotes) for segment in path)
    return f"{ROOT_MARKER}[{steps}]"
