"""Unit tests for the public API functions: is_editable, get_display_text, get_path_text."""

from __future__ import annotations

from json_node_inspector import (
    InspectorConfig,
    Row,
    get_display_text,
    get_path_text,
    is_editable,
)


class TestIsEditable:
    def test_scalar_rows_editable(self) -> None:
        assert is_editable([Row(key="a", value=1, type="number")]) is True

    def test_composite_only_not_editable(self) -> None:
        assert is_editable([Row(key="a", type="object")]) is False

    def test_none_not_editable(self) -> None:
        assert is_editable(None) is False


class TestGetDisplayText:
    def test_empty(self) -> None:
        assert get_display_text([]) == "{}"

    def test_single_value(self) -> None:
        assert get_display_text([{"value": 42, "type": "number"}]) == "42"

    def test_fields(self) -> None:
        rows = [
            {"key": "a", "value": 1, "type": "number"},
            {"key": "b", "value": "x", "type": "string"},
            {"key": "c", "type": "array"},
        ]
        assert get_display_text(rows) == '{\n  "a": 1,\n  "b": "x"\n}'

    def test_config_indent_passthrough(self) -> None:
        rows = [Row(key="a", value=1, type="number"), Row(key="b", value=2, type="number")]
        assert get_display_text(rows, InspectorConfig(indent=1)) == '{\n "a": 1,\n "b": 2\n}'

    def test_no_global_state_between_calls(self) -> None:
        rows = [Row(key="a", value=1, type="number"), Row(key="b", value=2, type="number")]
        assert get_display_text(rows) == get_display_text(rows)


class TestGetPathText:
    def test_root(self) -> None:
        assert get_path_text(None) == "$"
        assert get_path_text([]) == "$"

    def test_mixed(self) -> None:
        assert get_path_text(["customer", 0, "name"]) == '$["customer"][0]["name"]'

    def test_config_escape_passthrough(self) -> None:
        config = InspectorConfig(escape_path_quotes=True)
        assert get_path_text(['a"b'], config) == '$["a\\"b"]'

    def test_default_is_unescaped(self) -> None:
        assert get_path_text(['a"b']) == '$["a"b"]'
