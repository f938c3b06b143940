"""Row dataclass and RowType StrEnum for the row-based node representation.

A parsed document node arrives from upstream as an ordered list of rows.
Each row is one flattened entry of the node's content: a key (absent for an
unnamed root scalar), a scalar value, and a type tag.  Rows tagged ``array``
or ``object`` stand for nested children and never carry a usable value.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "COMPOSITE_TYPES",
    "EditableFieldMap",
    "Path",
    "PathSegment",
    "Row",
    "RowType",
    "ScalarValue",
    "SelectedNode",
    "as_row",
    "as_rows",
]

# Type aliases for the node representation
ScalarValue = str | int | float | bool | None
PathSegment = str | int
Path = Sequence[PathSegment]
EditableFieldMap = dict[str, ScalarValue]


class RowType(StrEnum):
    """Enumeration of the row type tags emitted by the upstream parser.

    StrEnum values are the lowercased member names:
    - STRING  -> "string"
    - NUMBER  -> "number"
    - BOOLEAN -> "boolean"
    - NULL    -> "null"
    - ARRAY   -> "array"   : composite, a nested JSON array
    - OBJECT  -> "object"  : composite, a nested JSON object

    Rows may carry tags outside this enumeration; any tag that is not
    ``array`` or ``object`` denotes a scalar.
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    ARRAY = auto()
    OBJECT = auto()


COMPOSITE_TYPES: frozenset[str] = frozenset({RowType.ARRAY, RowType.OBJECT})


@dataclass(frozen=True, slots=True)
class Row:
    """One entry of a node's decomposed content.

    Attributes:
        key:   Field name.  None (or "") for an unnamed root scalar or an
               array element.
        value: Scalar payload.  Meaningless when ``type`` is composite.
        type:  Type tag.  ``"array"`` and ``"object"`` are composite; every
               other tag is a scalar.
    """

    key: str | None = None
    value: ScalarValue = None
    type: str = RowType.STRING

    @property
    def is_composite(self) -> bool:
        """True for ``array`` and ``object`` rows."""
        return self.type in COMPOSITE_TYPES

    @property
    def has_key(self) -> bool:
        """True when the row carries a non-empty key."""
        return bool(self.key)


@dataclass(frozen=True, slots=True)
class SelectedNode:
    """The node currently selected in the document store.

    Attributes:
        rows: The node's rows in document order.
        path: Structural path of the node within the document.  None when
              the store cannot locate the node.
    """

    rows: tuple[Row, ...] = ()
    path: tuple[PathSegment, ...] | None = None

    @classmethod
    def of(cls, rows: Iterable[Any] | None, path: Path | None = None) -> SelectedNode:
        """Build a SelectedNode from loose rows and any path sequence."""
        return cls(
            rows=as_rows(rows),
            path=tuple(path) if path is not None else None,
        )


def as_row(obj: Row | Mapping[str, Any]) -> Row:
    """Coerce a Row or a plain mapping into a Row.

    Mappings are read leniently: missing ``key``, ``value`` or ``type``
    entries are treated as absent rather than raising.  A missing type is
    read as a scalar row.
    """
    if isinstance(obj, Row):
        return obj
    if not isinstance(obj, Mapping):
        raise TypeError(f"Expected a Row or a mapping, got {type(obj).__name__}")
    key = obj.get("key")
    return Row(
        key=None if key is None else str(key),
        value=obj.get("value"),
        type=str(obj.get("type") or RowType.STRING),
    )


def as_rows(rows: Iterable[Row | Mapping[str, Any]] | None) -> tuple[Row, ...]:
    """Coerce an iterable of rows (or None) into a tuple of Row objects.

    Entries that are neither a Row nor a mapping are skipped.
    """
    if not rows:
        return ()
    return tuple(as_row(row) for row in rows if isinstance(row, (Row, Mapping)))
