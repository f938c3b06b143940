"""InMemoryDocumentStore: a DocumentStore over a plain JSON value.

Holds one JSON document and a selected path.  The selected node's rows are
produced on demand with ``RowBuilder``; patches are merged into the object
at the patch path.  Satisfies the ``DocumentStore`` Protocol structurally
(no inheritance).

Example::

    store = InMemoryDocumentStore({"customer": {"name": "Ada", "age": 36}})
    store.select(["customer"])
    store.get_selected_node().rows
    # (Row(key="name", value="Ada", type="string"),
    #  Row(key="age", value=36, type="number"))
    store.apply_patch(["customer"], {"age": 37})
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from json_node_inspector.normalize.path import format_path
from json_node_inspector.tree.builder import JsonValue, build_rows
from json_node_inspector.tree.nodes import PathSegment, ScalarValue, SelectedNode

__all__ = ["InMemoryDocumentStore", "navigate_to_path"]

logger = logging.getLogger(__name__)


def navigate_to_path(document: Any, path: Sequence[PathSegment]) -> Any:
    """Return the value at ``path`` inside ``document``.

    Raises:
        KeyError: A key step is missing from its object.
        IndexError: An index step is out of range.
        TypeError: A step addresses a scalar, or an index step is used on an
            object (or a key step on an array).
    """
    target = document
    for segment in path:
        if isinstance(target, dict):
            if isinstance(segment, bool) or not isinstance(segment, str):
                raise TypeError(
                    f"Could not navigate to path {json.dumps(list(path))};"
                    f" object step must be a key, got {segment!r}"
                )
            target = target[segment]
        elif isinstance(target, list):
            if isinstance(segment, bool) or not isinstance(segment, int):
                raise TypeError(
                    f"Could not navigate to path {json.dumps(list(path))};"
                    f" array step must be an index, got {segment!r}"
                )
            target = target[segment]
        else:
            raise TypeError(
                f"Could not navigate to path {json.dumps(list(path))};"
                f" parent of step {segment!r} is a {type(target).__name__}"
            )
    return target


class InMemoryDocumentStore:
    """Reference document store backed by an in-memory JSON value.

    Args:
        document: The JSON document.  It is deep-copied; later changes to the
            caller's object do not leak in.
        selected: Initially selected path, or None for no selection.
    """

    def __init__(self, document: JsonValue, selected: Sequence[PathSegment] | None = None) -> None:
        self._document: Any = copy.deepcopy(document)
        self._selected: tuple[PathSegment, ...] | None = (
            tuple(selected) if selected is not None else None
        )
        self.patches_applied = 0

    @property
    def document(self) -> Any:
        """A deep copy of the current document."""
        return copy.deepcopy(self._document)

    @property
    def selected_path(self) -> tuple[PathSegment, ...] | None:
        return self._selected

    def select(self, path: Sequence[PathSegment]) -> None:
        """Select the node at ``path`` (validated eagerly)."""
        navigate_to_path(self._document, path)
        self._selected = tuple(path)

    def clear_selection(self) -> None:
        self._selected = None

    # ------------------------------------------------------------------
    # DocumentStore Protocol surface
    # ------------------------------------------------------------------

    def get_selected_node(self) -> SelectedNode | None:
        if self._selected is None:
            return None
        value = navigate_to_path(self._document, self._selected)
        return SelectedNode(rows=build_rows(value), path=self._selected)

    def apply_patch(
        self,
        path: Sequence[PathSegment],
        fields: Mapping[str, ScalarValue],
    ) -> None:
        """Merge ``fields`` into the object at ``path``.

        Raises:
            TypeError: The target is not an object and ``fields`` is non-empty.
            KeyError / IndexError / TypeError: ``path`` does not resolve.
        """
        target = navigate_to_path(self._document, path)
        if not isinstance(target, dict):
            if fields:
                raise TypeError(
                    f"Cannot patch fields {sorted(fields)} into a"
                    f" {type(target).__name__} at {format_path(path)}"
                )
            return
        target.update(fields)
        self.patches_applied += 1
        logger.debug(f"Patched {format_path(path)} with {sorted(fields)}")
