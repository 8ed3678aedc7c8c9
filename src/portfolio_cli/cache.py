"""Keyed client-side query cache with explicit invalidation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

QueryKey = tuple[Hashable, ...]
Listener = Callable[[QueryKey], None]

PROJECTS_KEY: QueryKey = ("projects",)


def project_key(project_id: str) -> QueryKey:
    return (*PROJECTS_KEY, project_id)


@dataclass
class _Entry:
    value: Any
    stale: bool = False


class QueryCache:
    """Map query keys to their last fetched value.

    ``invalidate`` marks an entry stale and tells the key's subscribers;
    it never fetches. The next ``fetch`` of a stale or missing key calls
    the fetcher again. A failed fetch leaves the previous entry in place.
    """

    def __init__(self) -> None:
        self._entries: dict[QueryKey, _Entry] = {}
        self._listeners: dict[QueryKey, list[Listener]] = {}

    def fetch(self, key: QueryKey, fetcher: Callable[[], Any]) -> Any:
        entry = self._entries.get(key)
        if entry is not None and not entry.stale:
            return entry.value
        logger.debug("Fetching %s (%s)", key, "stale" if entry else "missing")
        value = fetcher()
        self._entries[key] = _Entry(value)
        return value

    def peek(self, key: QueryKey) -> Any:
        """Last known value for *key*, stale or not; ``None`` if never fetched."""
        entry = self._entries.get(key)
        return entry.value if entry is not None else None

    def set(self, key: QueryKey, value: Any) -> None:
        self._entries[key] = _Entry(value)

    def is_stale(self, key: QueryKey) -> bool:
        entry = self._entries.get(key)
        return entry is None or entry.stale

    def invalidate(self, key: QueryKey) -> None:
        logger.debug("Invalidating %s", key)
        entry = self._entries.get(key)
        if entry is not None:
            entry.stale = True
        for listener in list(self._listeners.get(key, ())):
            listener(key)

    def subscribe(self, key: QueryKey, listener: Listener) -> Callable[[], None]:
        """Call *listener* whenever *key* is invalidated. Returns an unsubscribe function."""
        self._listeners.setdefault(key, []).append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners.get(key, [])
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe
