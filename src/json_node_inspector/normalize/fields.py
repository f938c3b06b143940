"""Editable-field extraction from a node's rows.

A row is editable when its type is scalar (anything but ``array`` or
``object``) and it carries a non-empty key.  Extraction is total: unknown
type tags count as scalars and missing keys simply drop the row.  Entries
that are not rows at all are skipped.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from json_node_inspector.tree.nodes import EditableFieldMap, Row, as_rows

__all__ = ["extract_fields", "is_editable"]


def extract_fields(rows: Iterable[Row | Mapping[str, Any]] | None) -> EditableFieldMap:
    """Return the editable scalar fields of a node as ``{key: value}``.

    Rows are visited in order; a later row with a duplicate key overwrites
    the earlier one.

    Args:
        rows: The node's rows.  None and empty input yield an empty map.

    Returns:
        A fresh dict; callers may mutate it freely.
    """
    fields: EditableFieldMap = {}
    for row in as_rows(rows):
        if not row.is_composite and row.has_key:
            fields[row.key] = row.value  # type: ignore[index]
    return fields


def is_editable(rows: Iterable[Row | Mapping[str, Any]] | None) -> bool:
    """Return True when at least one row is a scalar (non-composite) row.

    Gates whether the presentation shell offers an "Edit" action.
    """
    return any(not row.is_composite for row in as_rows(rows))
