"""Type inference for free-text field edits.

Every edited field arrives as text from an input widget.  ``coerce_text``
turns it back into a typed scalar with a fixed cascade (first match wins):

1. Trimmed text is non-empty and a numeric literal -> int or float.
2. Text is exactly ``"true"`` or ``"false"``        -> bool.
3. Text is exactly ``"null"``                       -> None.
4. Anything else                                    -> the text as entered.

Numeric literals follow the grammar of JavaScript's ``Number()`` so edits
behave identically to the web views of the same document:

- decimal with optional sign, fraction and exponent (``-1.5e3``, ``.5``, ``7.``)
- unsigned ``0x``/``0o``/``0b`` integers
- ``Infinity`` with optional sign

Python-only spellings such as ``1_000``, ``inf`` or ``nan`` stay text.

The cascade is lossy: a string field edited to ``"42"`` or ``"true"``
comes back as a number or a boolean.
"""

from __future__ import annotations

import re
import sys

from json_node_inspector.tree.nodes import ScalarValue

__all__ = ["coerce_text", "parse_number"]

# Decimal literal: digits with optional fraction, or a bare fraction; optional exponent
_DECIMAL = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?P<body>(?:\d+(?P<frac1>\.\d*)?|(?P<frac2>\.\d+))(?P<exp>[eE][+-]?\d+)?)",
    re.ASCII,
)

# Prefixed integer literal: unsigned hex, octal or binary
_PREFIXED = re.compile(r"0(?P<radix>[xXoObB])(?P<digits>[0-9a-fA-F]+)")

_RADIX = {"x": 16, "o": 8, "b": 2}

_INFINITY = re.compile(r"(?P<sign>[+-]?)Infinity")


def _too_long_for_int(digits: str) -> bool:
    """True when int() would refuse ``digits`` (see sys.get_int_max_str_digits)."""
    limit = sys.get_int_max_str_digits()
    return limit > 0 and len(digits) > limit


def parse_number(text: str) -> int | float | None:
    """Parse ``text`` as a numeric literal, or return None when it is not one.

    Leading and trailing whitespace is ignored; empty or whitespace-only
    text is not numeric.  Integer literals yield ``int``, everything else
    ``float``.  Integer literals too long for ``int()`` are read as floats,
    so a long run of nines becomes ``inf``.
    """
    stripped = text.strip()
    if not stripped:
        return None

    match = _DECIMAL.fullmatch(stripped)
    if match:
        if match["frac1"] or match["frac2"] or match["exp"] or _too_long_for_int(match["body"]):
            return float(stripped)
        return int(stripped)

    match = _PREFIXED.fullmatch(stripped)
    if match:
        try:
            return int(match["digits"], _RADIX[match["radix"].lower()])
        except ValueError:
            # digits outside the radix, e.g. 0b102
            return None

    match = _INFINITY.fullmatch(stripped)
    if match:
        return float("-inf") if match["sign"] == "-" else float("inf")

    return None


def coerce_text(text: str) -> ScalarValue:
    """Coerce edited field text into a typed scalar.

    Args:
        text: The raw text from the input widget.

    Returns:
        A number, bool, None, or ``text`` itself (see module docstring for
        the precedence).
    """
    number = parse_number(text)
    if number is not None:
        return number
    if text in ("true", "false"):
        return text == "true"
    if text == "null":
        return None
    return text
