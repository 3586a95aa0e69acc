"""
Filter Registry

FilterRegistry: in-process store of named value filters. Each callback
receives the current value (plus any extra arguments) and returns the new
value. Callbacks run by ascending priority, then in registration order.

A callback that raises is logged and skipped; the value it received is
passed on unchanged.
"""

from __future__ import annotations

import itertools
import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


class FilterRegistry:
    """Named value filters, applied in priority order."""

    def __init__(self) -> None:
        self._filters: dict[str, list[tuple[int, int, Callable[..., Any]]]] = defaultdict(list)
        self._sequence = itertools.count()

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        """Subscribe a callback to a filter."""
        self._filters[name].append((priority, next(self._sequence), callback))
        self._filters[name].sort(key=lambda entry: (entry[0], entry[1]))

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        """Unsubscribe a callback. Returns True if it was subscribed."""
        entries = self._filters.get(name, [])
        remaining = [entry for entry in entries if entry[2] is not callback]
        if len(remaining) == len(entries):
            return False
        self._filters[name] = remaining
        return True

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def clear(self, name: str | None = None) -> None:
        """Drop the callbacks of one filter, or of every filter."""
        if name is None:
            self._filters.clear()
        else:
            self._filters.pop(name, None)

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """
        Pass a value through every callback subscribed to a filter.

        Args:
            name:  Filter constant from block_fields.plugins.hooks.
            value: Value to filter.
            *args: Extra context handed to every callback.

        Returns:
            The filtered value (the input value if nothing is subscribed).
        """
        for _priority, _seq, callback in list(self._filters.get(name, [])):
            try:
                value = callback(value, *args)
            except Exception as exc:
                logger.warning("Filter %s callback %r raised: %s", name, callback, exc)
        return value


# ── Global singleton ──────────────────────────────────────────────────────────
filters = FilterRegistry()
