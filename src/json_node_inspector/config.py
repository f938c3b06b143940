"""InspectorConfig: immutable settings for display rendering and path formatting.

InspectorConfig is a frozen (immutable) dataclass validated on construction.
It governs presentation details only; the field-extraction and coercion
rules are fixed.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["InspectorConfig"]


@dataclass(frozen=True, slots=True)
class InspectorConfig:
    """Immutable configuration for a node inspector panel.

    Attributes:
        indent: Number of spaces per indentation level in the read-only
            display text (>= 0).  Default 2.
        escape_path_quotes: When True, backslashes and double quotes inside
            string path segments are backslash-escaped.  Default False, which
            interpolates segments verbatim (``$["a"b"]``).
        max_cache_size: Maximum number of display renderings held in the
            per-session LRU cache (>= 1).  Default 128.
    """

    indent: int = 2
    escape_path_quotes: bool = False
    max_cache_size: int = 128

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if self.max_cache_size < 1:
            msg = f"max_cache_size must be >= 1, got {self.max_cache_size}"
            raise ValueError(msg)
