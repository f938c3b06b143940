"""RowBuilder: decomposes a JSON value into the row representation of one node.

Uses type dispatch to turn the value at a node into rows:
- An object yields one row per key.  Scalar members carry their value;
  nested objects and arrays become composite rows with no value.
- An array yields one keyless row per element, composites included.
- A scalar yields a single keyless row (the "bare primitive" node).

This mirrors what an upstream graph parser hands to the inspector, and is
what ``InMemoryDocumentStore`` uses to answer ``get_selected_node()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_node_inspector.tree.nodes import Row, RowType

__all__ = ["JsonValue", "RowBuilder", "build_rows", "row_type_of"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


def row_type_of(value: Any) -> RowType:
    """Return the RowType tag for a JSON value.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return RowType.BOOLEAN
    if isinstance(value, dict):
        return RowType.OBJECT
    if isinstance(value, list):
        return RowType.ARRAY
    if isinstance(value, (int, float)):
        return RowType.NUMBER
    if isinstance(value, str):
        return RowType.STRING
    if value is None:
        return RowType.NULL
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass
class RowBuilder:
    """Converts the JSON value at a node into a tuple of Rows.

    Example::
        builder = RowBuilder()
        builder.build({"name": "Ada", "tags": ["x"]})
        # (Row(key="name", value="Ada", type="string"),
        #  Row(key="tags", value=None, type="array"))
    """

    def build(self, value: JsonValue) -> tuple[Row, ...]:
        """Decompose a JSON value into rows.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            The node's rows in document order.

        Raises:
            TypeError: If value (or a member of it) is not a valid JSON type.
        """
        if isinstance(value, dict):
            return tuple(self._row(str(key), member) for key, member in value.items())
        if isinstance(value, list):
            return tuple(self._row(None, item) for item in value)
        return (self._row(None, value),)

    def _row(self, key: str | None, value: Any) -> Row:
        row_type = row_type_of(value)
        if row_type in (RowType.ARRAY, RowType.OBJECT):
            return Row(key=key, value=None, type=row_type)
        return Row(key=key, value=value, type=row_type)


# Module-level builder (stateless, safe to share)
_builder = RowBuilder()


def build_rows(value: JsonValue) -> tuple[Row, ...]:
    """Shorthand for ``RowBuilder().build(value)``."""
    return _builder.build(value)
