"""Tests for EditSession, the viewing/editing state machine.

Covers:
- Initial state and lifecycle (open, close, selection changes)
- begin_edit gating on editability and idempotence while editing
- change_field coercion, unknown keys and mode checks
- cancel restoring a fresh extraction
- save: patch delivery, NoPathError, store failures propagating unchanged
- Read-only surface (display_text, path_text, field texts) and config
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import pytest

from json_node_inspector.config import InspectorConfig
from json_node_inspector.exceptions import (
    EditStateError,
    InspectorError,
    InvalidFieldError,
    NoPathError,
)
from json_node_inspector.normalize.fields import extract_fields
from json_node_inspector.patch import Patch
from json_node_inspector.session import EditMode, EditSession
from json_node_inspector.tree.nodes import Row, SelectedNode

# ---------------------------------------------------------------------------
# Spy store
# ---------------------------------------------------------------------------


class _SpyStore:
    """DocumentStore double recording every apply_patch call."""

    def __init__(self, node: SelectedNode | None = None, fail_with: Exception | None = None) -> None:
        self.node = node
        self.fail_with = fail_with
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def get_selected_node(self) -> SelectedNode | None:
        return self.node

    def apply_patch(self, path: Sequence[Any], fields: dict[str, Any]) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.calls.append((tuple(path), dict(fields)))


CUSTOMER_ROWS = (
    Row(key="name", value="Ada", type="string"),
    Row(key="age", value=36, type="number"),
    Row(key="active", value=True, type="boolean"),
    Row(key="orders", value=None, type="array"),
)
CUSTOMER = SelectedNode(rows=CUSTOMER_ROWS, path=("customers", 0))

ONLY_COMPOSITE = SelectedNode(
    rows=(Row(key="a", type="array"), Row(key="b", type="object")),
    path=("root",),
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> _SpyStore:
    return _SpyStore(CUSTOMER)


@pytest.fixture
def session(store: _SpyStore) -> EditSession:
    """An opened session on the customer node."""
    s = EditSession(store)
    s.open()
    return s


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestLifecycle:
    def test_initial_state(self, store: _SpyStore) -> None:
        s = EditSession(store)
        assert s.mode == EditMode.VIEWING
        assert s.is_open is False
        assert s.get_working_fields() == {}
        assert s.node is None

    def test_open_extracts_fields(self, session: EditSession) -> None:
        assert session.is_open is True
        assert session.mode == EditMode.VIEWING
        assert session.get_working_fields() == {"name": "Ada", "age": 36, "active": True}

    def test_open_with_no_selection(self) -> None:
        s = EditSession(_SpyStore(None))
        s.open()
        assert s.get_working_fields() == {}
        assert s.editable is False
        assert s.display_text == "{}"
        assert s.path_text == "$"

    def test_close_discards_working_values(self, session: EditSession) -> None:
        session.begin_edit()
        session.set_field("name", "Grace")
        session.close()
        assert session.is_open is False
        assert session.mode == EditMode.VIEWING
        assert session.get_working_fields() == {}

    def test_reopen_reextracts(self, session: EditSession) -> None:
        session.begin_edit()
        session.set_field("age", "99")
        session.close()
        session.open()
        assert session.get_working_fields() == extract_fields(CUSTOMER_ROWS)

    def test_selection_change_while_editing_resets(self, store: _SpyStore, session: EditSession) -> None:
        session.begin_edit()
        session.set_field("name", "unsaved")
        store.node = SelectedNode(rows=(Row(key="sku", value="X1", type="string"),), path=("items", 2))
        session.on_selection_changed()
        assert session.mode == EditMode.VIEWING
        assert session.get_working_fields() == {"sku": "X1"}
        assert session.path == ("items", 2)

    def test_select_pushes_node_directly(self, session: EditSession) -> None:
        session.begin_edit()
        session.select(ONLY_COMPOSITE)
        assert session.mode == EditMode.VIEWING
        assert session.get_working_fields() == {}
        assert session.rows == ONLY_COMPOSITE.rows

    def test_select_none_clears_node(self, session: EditSession) -> None:
        session.select(None)
        assert session.node is None
        assert session.rows == ()
        assert session.path is None


# ---------------------------------------------------------------------------
# begin_edit
# ---------------------------------------------------------------------------


class TestBeginEdit:
    def test_enters_editing(self, session: EditSession) -> None:
        assert session.begin_edit() is True
        assert session.mode == EditMode.EDITING
        assert session.is_editing is True

    def test_not_editable_is_noop(self) -> None:
        s = EditSession(_SpyStore(ONLY_COMPOSITE))
        s.open()
        assert s.editable is False
        assert s.begin_edit() is False
        assert s.mode == EditMode.VIEWING

    def test_second_begin_edit_keeps_edits(self, session: EditSession) -> None:
        session.begin_edit()
        session.set_field("age", "40")
        assert session.begin_edit() is True
        assert session.get_working_fields()["age"] == 40

    def test_working_values_hold_last_extraction(self, session: EditSession) -> None:
        session.begin_edit()
        assert session.get_working_fields() == extract_fields(CUSTOMER_ROWS)


# ---------------------------------------------------------------------------
# change_field
# ---------------------------------------------------------------------------


class TestChangeField:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("42", 42), ("true", True), ("false", False), ("null", None), ("abc", "abc"), ("", "")],
    )
    def test_coercion(self, session: EditSession, text: str, expected: Any) -> None:
        session.begin_edit()
        assert session.change_field("name", text) == expected
        assert session.get_working_fields()["name"] == expected

    def test_number_type_preserved(self, session: EditSession) -> None:
        session.begin_edit()
        session.set_field("age", "37")
        value = session.get_working_fields()["age"]
        assert value == 37
        assert isinstance(value, int)

    def test_overlong_number_text(self, session: EditSession) -> None:
        session.begin_edit()
        assert session.change_field("age", "9" * 5000) == float("inf")
        assert session.get_field_texts()["age"] == "Infinity"

    def test_unknown_key_raises(self, session: EditSession) -> None:
        session.begin_edit()
        with pytest.raises(InvalidFieldError) as excinfo:
            session.change_field("orders", "1")
        assert excinfo.value.key == "orders"
        assert "orders" not in session.get_working_fields()

    def test_invalid_field_is_a_key_error(self, session: EditSession) -> None:
        session.begin_edit()
        with pytest.raises(KeyError):
            session.change_field("missing", "x")

    def test_viewing_raises(self, session: EditSession) -> None:
        with pytest.raises(EditStateError):
            session.change_field("name", "x")
        assert session.get_working_fields()["name"] == "Ada"

    def test_working_fields_is_a_copy(self, session: EditSession) -> None:
        session.begin_edit()
        fields = session.get_working_fields()
        fields["name"] = "tampered"
        assert session.get_working_fields()["name"] == "Ada"

    def test_lossy_coercion_logged(self, session: EditSession, caplog: pytest.LogCaptureFixture) -> None:
        session.begin_edit()
        with caplog.at_level(logging.DEBUG, logger="json_node_inspector.session"):
            session.change_field("name", "true")
        assert "coerced" in caplog.text

    def test_field_texts(self, session: EditSession) -> None:
        session.begin_edit()
        session.set_field("name", "null")
        assert session.get_field_texts() == {"name": "", "age": "36", "active": "true"}


# ---------------------------------------------------------------------------
# cancel
# ---------------------------------------------------------------------------


class TestCancel:
    def test_restores_extraction(self, session: EditSession) -> None:
        session.begin_edit()
        session.set_field("name", "Grace")
        session.set_field("age", "1")
        session.set_field("active", "false")
        session.cancel()
        assert session.mode == EditMode.VIEWING
        assert session.get_working_fields() == extract_fields(CUSTOMER_ROWS)

    def test_discard_alias(self, session: EditSession) -> None:
        session.begin_edit()
        session.set_field("name", "Grace")
        session.discard()
        assert session.get_working_fields()["name"] == "Ada"

    def test_no_store_call(self, store: _SpyStore, session: EditSession) -> None:
        session.begin_edit()
        session.cancel()
        assert store.calls == []

    def test_can_edit_again_after_cancel(self, session: EditSession) -> None:
        session.begin_edit()
        session.cancel()
        assert session.begin_edit() is True


# ---------------------------------------------------------------------------
# save
# ---------------------------------------------------------------------------


class TestSave:
    def test_applies_full_field_map(self, store: _SpyStore, session: EditSession) -> None:
        session.begin_edit()
        session.set_field("age", "37")
        patch = session.save()
        assert store.calls == [(("customers", 0), {"name": "Ada", "age": 37, "active": True})]
        assert patch == Patch(path=("customers", 0), fields={"name": "Ada", "age": 37, "active": True})

    def test_closes_session(self, session: EditSession) -> None:
        session.begin_edit()
        session.commit()
        assert session.mode == EditMode.VIEWING
        assert session.is_open is False
        assert session.get_working_fields() == {}

    def test_root_path_is_a_path(self) -> None:
        store = _SpyStore(SelectedNode(rows=(Row(key="a", value=1, type="number"),), path=()))
        s = EditSession(store)
        s.open()
        s.begin_edit()
        s.save()
        assert store.calls == [((), {"a": 1})]

    def test_missing_path_raises_and_stays_editing(self, caplog: pytest.LogCaptureFixture) -> None:
        store = _SpyStore(SelectedNode(rows=CUSTOMER_ROWS, path=None))
        s = EditSession(store)
        s.open()
        s.begin_edit()
        s.set_field("name", "Grace")
        with caplog.at_level(logging.WARNING), pytest.raises(NoPathError):
            s.save()
        assert s.mode == EditMode.EDITING
        assert s.get_working_fields()["name"] == "Grace"
        assert store.calls == []
        assert "no path" in caplog.text

    def test_no_path_error_is_inspector_error(self) -> None:
        assert issubclass(NoPathError, InspectorError)

    def test_store_failure_propagates_unchanged(self) -> None:
        failure = RuntimeError("disk full")
        store = _SpyStore(CUSTOMER, fail_with=failure)
        s = EditSession(store)
        s.open()
        s.begin_edit()
        s.set_field("age", "50")
        with pytest.raises(RuntimeError) as excinfo:
            s.save()
        assert excinfo.value is failure
        assert s.mode == EditMode.EDITING
        assert s.is_open is True
        assert s.get_working_fields()["age"] == 50

    def test_save_while_viewing_raises(self, store: _SpyStore, session: EditSession) -> None:
        with pytest.raises(EditStateError):
            session.save()
        assert store.calls == []

    def test_patch_fields_detached_from_session(self, store: _SpyStore, session: EditSession) -> None:
        session.begin_edit()
        patch = session.save()
        patch.fields["name"] = "tampered"
        assert store.calls[0][1]["name"] == "Ada"


# ---------------------------------------------------------------------------
# Read-only surface
# ---------------------------------------------------------------------------


class TestReadOnlySurface:
    def test_display_text_from_original_rows(self, session: EditSession) -> None:
        session.begin_edit()
        session.set_field("name", "Grace")
        assert '"name": "Ada"' in session.display_text
        assert "orders" not in session.display_text

    def test_path_text(self, session: EditSession) -> None:
        assert session.path_text == '$["customers"][0]'

    def test_config_indent(self, store: _SpyStore) -> None:
        s = EditSession(store, InspectorConfig(indent=4))
        s.open()
        assert '\n    "name": "Ada"' in s.display_text

    def test_config_escape_quotes(self) -> None:
        node = SelectedNode(rows=(), path=('a"b',))
        s = EditSession(_SpyStore(node), InspectorConfig(escape_path_quotes=True))
        s.open()
        assert s.path_text == '$["a\\"b"]'

    def test_default_config(self, session: EditSession) -> None:
        assert session.config == InspectorConfig()

    def test_single_value_display(self) -> None:
        node = SelectedNode(rows=(Row(key=None, value=42, type="number"),), path=())
        s = EditSession(_SpyStore(node))
        s.open()
        assert s.display_text == "42"
        assert s.editable is True
        assert s.get_working_fields() == {}
