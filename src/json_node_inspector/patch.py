"""Patch dataclass: the proposed change an edit session hands to the store."""

from __future__ import annotations

from dataclasses import dataclass, field

from json_node_inspector.tree.nodes import EditableFieldMap, PathSegment

__all__ = ["Patch"]


@dataclass(frozen=True, slots=True)
class Patch:
    """A set of field-value updates for one node, keyed by the node's path.

    Attributes:
        path: Structural path of the node the patch applies to.
        fields: Every editable field of the node with its coerced value,
            edited or not.  The store merges them into the node.
    """

    path: tuple[PathSegment, ...]
    fields: EditableFieldMap = field(default_factory=dict)
