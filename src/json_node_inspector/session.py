"""EditSession: viewing/editing state machine for one inspector panel.

The session holds a scratch copy of the selected node's editable fields and
mediates between two modes:

- VIEWING (initial): the panel shows the read-only display text.
- EDITING: the panel shows one text input per editable field.

Transitions::

    VIEWING --begin_edit--> EDITING        (only when the node is editable)
    EDITING --change_field--> EDITING      (text coerced into working values)
    EDITING --cancel--> VIEWING            (working values re-extracted)
    EDITING --save--> VIEWING, closed      (patch applied by the store)
    any     --open / select / on_selection_changed--> VIEWING (re-extracted)

The canonical document is never touched directly: ``save()`` proposes a
single ``Patch`` to the injected ``DocumentStore``.  A save on a node without
a path raises ``NoPathError``; a store failure propagates unchanged.  In both
cases the session stays in EDITING with the working values intact.
"""

from __future__ import annotations

import logging
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

from json_node_inspector.cache import DisplayCache
from json_node_inspector.config import InspectorConfig
from json_node_inspector.exceptions import EditStateError, InvalidFieldError, NoPathError
from json_node_inspector.normalize.coercion import coerce_text
from json_node_inspector.normalize.display import stringify_scalar
from json_node_inspector.normalize.fields import extract_fields, is_editable
from json_node_inspector.normalize.path import format_path
from json_node_inspector.patch import Patch

if TYPE_CHECKING:
    from json_node_inspector.protocols import DocumentStore
    from json_node_inspector.tree.nodes import (
        EditableFieldMap,
        PathSegment,
        Row,
        ScalarValue,
        SelectedNode,
    )

__all__ = ["EditMode", "EditSession"]

logger = logging.getLogger(__name__)


class EditMode(StrEnum):
    """Mode of an inspector panel.

    - VIEWING: read-only display of the node.
    - EDITING: per-field text inputs over the working values.
    """

    VIEWING = auto()
    EDITING = auto()


class EditSession:
    """State machine coordinating the view and edit modes of one panel.

    One session belongs to one panel instance, so at most one edit is in
    flight per panel: a second ``begin_edit()`` while editing is a no-op.

    Example::

        session = EditSession(store)
        session.open()
        if session.begin_edit():
            session.set_field("age", "42")
            patch = session.commit()   # store.apply_patch(path, {"age": 42, ...})
    """

    def __init__(self, store: DocumentStore, config: InspectorConfig | None = None) -> None:
        """Initialise the session.

        Args:
            store:  A DocumentStore-conformant object.  Read for the selected
                node, written only through ``apply_patch``.
            config: Presentation settings.  Defaults to ``InspectorConfig()``.
        """
        self._store: Any = store
        self._config: InspectorConfig = config if config is not None else InspectorConfig()
        self._display_cache = DisplayCache(max_size=self._config.max_cache_size)
        self._node: SelectedNode | None = None
        self._mode: EditMode = EditMode.VIEWING
        self._working: EditableFieldMap = {}
        self._open = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def mode(self) -> EditMode:
        return self._mode

    @property
    def is_editing(self) -> bool:
        return self._mode is EditMode.EDITING

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def config(self) -> InspectorConfig:
        return self._config

    @property
    def node(self) -> SelectedNode | None:
        """The node the session was last reset from."""
        return self._node

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._node.rows if self._node is not None else ()

    @property
    def path(self) -> tuple[PathSegment, ...] | None:
        return self._node.path if self._node is not None else None

    @property
    def editable(self) -> bool:
        """True when the "Edit" action should be offered."""
        return is_editable(self.rows)

    @property
    def display_text(self) -> str:
        """Read-only rendering of the node's original rows."""
        return self._display_cache.get(self.rows, indent=self._config.indent)

    @property
    def path_text(self) -> str:
        """Bracket path of the node, ``$`` when it has none."""
        return format_path(self.path, escape_quotes=self._config.escape_path_quotes)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Open the panel on the store's current selection."""
        self._open = True
        self._reset(self._store.get_selected_node())

    def close(self) -> None:
        """Close the panel; unsaved working values are discarded."""
        self._open = False
        self._mode = EditMode.VIEWING
        self._working = {}
        logger.debug("Inspector session closed")

    def on_selection_changed(self) -> None:
        """Re-read the store's selection and reset to VIEWING."""
        self._reset(self._store.get_selected_node())

    def select(self, node: SelectedNode | None) -> None:
        """Reset to VIEWING on ``node``, discarding any unsaved edits."""
        self._reset(node)

    def _reset(self, node: SelectedNode | None) -> None:
        if self._mode is EditMode.EDITING:
            logger.debug("Selection reset while editing; unsaved edits discarded")
        self._node = node
        self._working = extract_fields(self.rows)
        self._mode = EditMode.VIEWING
        logger.debug(f"Session reset: path={self.path_text}, fields={list(self._working)}")

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def begin_edit(self) -> bool:
        """Enter EDITING when the node is editable.

        Returns:
            True if the session is in EDITING afterwards.
        """
        if self._mode is EditMode.EDITING:
            return True
        if not self.editable:
            logger.debug(f"begin_edit ignored: {self.path_text} has no scalar rows")
            return False
        self._mode = EditMode.EDITING
        logger.debug(f"Editing {self.path_text}")
        return True

    def get_working_fields(self) -> EditableFieldMap:
        """Return a copy of the working values."""
        return dict(self._working)

    def get_field_texts(self) -> dict[str, str]:
        """Return the working values as input-widget text (null shows as empty)."""
        return {
            key: "" if value is None else stringify_scalar(value)
            for key, value in self._working.items()
        }

    def change_field(self, key: str, text: str) -> ScalarValue:
        """Coerce ``text`` and store it as the working value of ``key``.

        Returns:
            The coerced value.

        Raises:
            EditStateError: If the session is not EDITING.
            InvalidFieldError: If ``key`` is not one of the working fields.
        """
        if self._mode is not EditMode.EDITING:
            raise EditStateError(f"Cannot change field {key!r} while {self._mode}")
        if key not in self._working:
            raise InvalidFieldError(key, list(self._working))

        value = coerce_text(text)
        previous = self._working[key]
        if isinstance(previous, str) and not isinstance(value, str):
            logger.debug(f"Field {key!r} was text, coerced {text!r} to {type(value).__name__}")
        self._working[key] = value
        return value

    set_field = change_field

    def cancel(self) -> None:
        """Discard edits and return to VIEWING with freshly extracted values."""
        self._working = extract_fields(self.rows)
        self._mode = EditMode.VIEWING
        logger.debug(f"Edit of {self.path_text} cancelled")

    discard = cancel

    def save(self) -> Patch:
        """Send the working values to the store and close the session.

        Returns:
            The patch that was applied.

        Raises:
            EditStateError: If the session is not EDITING.
            NoPathError: If the node has no path.  Nothing is sent.
            Exception: Whatever ``store.apply_patch`` raises, unchanged.
        """
        if self._mode is not EditMode.EDITING:
            raise EditStateError(f"Cannot save while {self._mode}")
        path = self.path
        if path is None:
            logger.warning("Save refused: selected node has no path")
            raise NoPathError()

        patch = Patch(path=path, fields=dict(self._working))
        self._store.apply_patch(patch.path, dict(patch.fields))
        logger.debug(f"Applied patch to {self.path_text}: {sorted(patch.fields)}")
        self.close()
        return patch

    commit = save
