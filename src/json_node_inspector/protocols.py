"""DocumentStore Protocol: the inspector's only view of the document.

Defines the structural interface a document store must satisfy.  Stores plug
in without inheriting from any base class; any class with conformant
``get_selected_node`` and ``apply_patch`` methods passes ``isinstance``
checks.

Example::

    from json_node_inspector.protocols import DocumentStore
    from json_node_inspector.tree import SelectedNode

    class MyStore:
        def get_selected_node(self) -> SelectedNode | None:
            return SelectedNode.of([{"key": "a", "value": 1, "type": "number"}], ["root"])

        def apply_patch(self, path, fields) -> None:
            ...

    assert isinstance(MyStore(), DocumentStore)  # True, structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from json_node_inspector.tree.nodes import EditableFieldMap, PathSegment, SelectedNode

__all__ = ["DocumentStore"]


@runtime_checkable
class DocumentStore(Protocol):
    """Structural protocol for the document store owning the canonical tree.

    The store must:
    - Report the currently selected node (rows plus path), or None when
      nothing is selected.  The selection may change at any time.
    - Apply a patch of scalar field values to the node at ``path``.  This is
      the sole mutation entry point; failures are raised and propagate to
      the inspector's caller unchanged.
    """

    def get_selected_node(self) -> SelectedNode | None: ...

    def apply_patch(self, path: Sequence[PathSegment], fields: EditableFieldMap) -> None: ...
