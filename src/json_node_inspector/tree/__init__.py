"""Tree subpackage for the row-based node representation.

Re-exports the public API for the tree module:
- Row: dataclass for one flattened entry of a node's content
- RowType: StrEnum of the known row type tags
- SelectedNode: rows plus structural path of the selected node
- RowBuilder / build_rows: decompose a JSON value into rows
"""

from json_node_inspector.tree.builder import RowBuilder, build_rows, row_type_of
from json_node_inspector.tree.nodes import (
    COMPOSITE_TYPES,
    EditableFieldMap,
    Path,
    PathSegment,
    Row,
    RowType,
    ScalarValue,
    SelectedNode,
    as_row,
    as_rows,
)

__all__ = [
    "COMPOSITE_TYPES",
    "EditableFieldMap",
    "Path",
    "PathSegment",
    "Row",
    "RowBuilder",
    "RowType",
    "ScalarValue",
    "SelectedNode",
    "as_row",
    "as_rows",
    "build_rows",
    "row_type_of",
]
