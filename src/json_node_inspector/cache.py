"""DisplayCache: LRU-backed memo of rendered display text.

A presentation shell asks for the display text of the selected node on every
repaint.  ``DisplayCache`` keeps the most recent renderings keyed by the
node's rows and the indentation, so repeated repaints of an unchanged node
skip the JSON serialization.  LRU eviction occurs silently when
``max_size`` is exceeded.

Each ``DisplayCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state, so two panels never interfere with each other.

Example::

    from json_node_inspector.cache import DisplayCache
    from json_node_inspector.tree import Row

    cache = DisplayCache(max_size=64)
    rows = (Row(key="a", value=1, type="number"),)

    text = cache.get(rows)        # renders and stores
    text_again = cache.get(rows)  # served from memory
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from cachetools import LRUCache

from json_node_inspector.normalize.display import normalize_node_data
from json_node_inspector.tree.nodes import Row, as_rows

__all__ = ["DisplayCache"]

logger = logging.getLogger(__name__)


class DisplayCache:
    """LRU-backed cache around ``normalize_node_data``.

    Args:
        max_size: Maximum number of renderings to hold in memory.
            Defaults to 128.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, max_size: int = 128) -> None:
        self._cache: LRUCache[tuple[tuple[Row, ...], int], str] = LRUCache(maxsize=max_size)
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, rows: Iterable[Row | Mapping[str, Any]] | None, indent: int = 2) -> str:
        """Return the display text for ``rows``, rendering it on a miss.

        Rows whose values are not hashable (never produced by a well-behaved
        parser) are rendered without touching the cache.
        """
        node_rows = as_rows(rows)
        key = (node_rows, indent)
        try:
            cached = self._cache.get(key)
        except TypeError:
            logger.debug("Unhashable rows; rendering display text uncached")
            return normalize_node_data(node_rows, indent=indent)

        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        text = normalize_node_data(node_rows, indent=indent)
        self._cache[key] = text
        logger.debug(f"Cached display text for {len(node_rows)} rows (size={self.curr_size})")
        return text

    def clear(self) -> None:
        """Drop every cached rendering."""
        self._cache.clear()
