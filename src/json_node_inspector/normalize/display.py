"""Read-only display text for a node's rows.

The display view is a JSON rendering of the node's scalar fields.  Two
shapes are special:

- No rows at all renders as ``{}``.
- A single keyless row (a document whose root is a bare primitive) renders
  as the value itself, not wrapped in an object, so the view does not
  misrepresent the document's shape.

Numbers are rendered the way a browser JSON view shows them (JavaScript
``Number.prototype.toString``): integral floats lose their trailing ``.0``,
exponents have no leading zeros (``1e-7``, ``1e+21``), plain notation is
used from ``1e-6`` up to ``1e21``, and non-finite floats become ``null``
inside objects.  Integers too long for ``str()`` are shown as the float
they round to.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from json_node_inspector.normalize.fields import extract_fields
from json_node_inspector.tree.nodes import Row, as_rows

__all__ = ["format_number", "normalize_node_data", "stringify_scalar"]

# JavaScript switches to exponent form at 10**21 and below 10**-6
_MAX_PLAIN_EXPONENT = 21
_MIN_PLAIN_EXPONENT = -6


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _format_float(value: float) -> str:
    """Render a finite float like JavaScript's ``Number.prototype.toString``."""
    if value == 0:
        return "0"
    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    text = "".join(map(str, digits)).rstrip("0")
    exponent += len(digits) - len(text)
    # value = 0.<text> * 10**point
    point = exponent + len(text)
    minus = "-" if sign else ""

    if len(text) <= point <= _MAX_PLAIN_EXPONENT:
        return minus + text + "0" * (point - len(text))
    if 0 < point <= _MAX_PLAIN_EXPONENT:
        return f"{minus}{text[:point]}.{text[point:]}"
    if _MIN_PLAIN_EXPONENT < point <= 0:
        return f"{minus}0.{'0' * -point}{text}"

    mantissa = text if len(text) == 1 else f"{text[0]}.{text[1:]}"
    power = point - 1
    return f"{minus}{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def format_number(value: int | float) -> str:
    """Render a number as JavaScript would print it.

    ``3.0`` -> ``"3"``, ``1e-7`` -> ``"1e-7"``, ``1e21`` -> ``"1e+21"``,
    ``inf`` -> ``"Infinity"``, ``nan`` -> ``"NaN"``.
    """
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # more digits than int->str conversion allows
            return format_number(_int_to_float(value))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return _format_float(value)


def stringify_scalar(value: Any) -> str:
    """Render a scalar value as text, matching JavaScript string interpolation.

    ``None`` -> ``"null"``, booleans -> ``"true"``/``"false"``, numbers via
    ``format_number``; strings are returned unchanged.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def _json_value(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return stringify_scalar(value)
    if isinstance(value, (int, float)):
        text = format_number(value)
        # JSON has no Infinity or NaN
        return "null" if text in ("Infinity", "-Infinity", "NaN") else text
    return json.dumps(value, ensure_ascii=False, default=str)


def _json_object(fields: Mapping[str, Any], indent: int) -> str:
    """Render a flat object the way ``JSON.stringify(obj, null, indent)`` does."""
    if not fields:
        return "{}"
    members = [
        (json.dumps(key, ensure_ascii=False), _json_value(value))
        for key, value in fields.items()
    ]
    if indent == 0:
        return "{" + ",".join(f"{key}:{value}" for key, value in members) + "}"
    pad = " " * indent
    body = ",\n".join(f"{pad}{key}: {value}" for key, value in members)
    return "{\n" + body + "\n}"


def normalize_node_data(
    rows: Iterable[Row | Mapping[str, Any]] | None,
    indent: int = 2,
) -> str:
    """Return the canonical display text for a node.

    Args:
        rows:   The node's rows.  None and empty input render as ``"{}"``.
        indent: Spaces per indentation level for the JSON rendering; 0 gives
                the compact single-line form.

    Returns:
        The stringified value for a single keyless row; otherwise the
        node's editable fields as indented JSON.  Composite and keyless
        rows are left out of the JSON rendering.
    """
    node_rows = as_rows(rows)
    if not node_rows:
        return "{}"
    if len(node_rows) == 1 and not node_rows[0].has_key:
        return stringify_scalar(node_rows[0].value)
    return _json_object(extract_fields(node_rows), indent)
