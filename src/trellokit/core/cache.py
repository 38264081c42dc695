"""Entity cache - one live instance per (type, id).

Collections and references resolve entities through the cache so that a card
reached via `board.cards` and via `list.cards` is the same object and shares
its synchronized data.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Cache:
    """Thread-safe identity map keyed by entity type and id."""

    def __init__(self) -> None:
        self._items: dict[tuple[type, str], Any] = {}
        self._lock = threading.Lock()

    def find(self, entity_type: type[T], entity_id: str | None) -> T | None:
        """Find a cached entity, or None."""
        if not entity_id:
            return None
        with self._lock:
            item = self._items.get((entity_type, entity_id))
        if item is not None:
            logger.debug(f"Cache hit for {entity_type.__name__} {entity_id}")
        return item

    def add(self, entity: Any) -> None:
        entity_id = getattr(entity, "id", None)
        if not entity_id:
            return
        with self._lock:
            self._items[(type(entity), entity_id)] = entity

    def remove(self, entity: Any) -> None:
        with self._lock:
            self._items.pop((type(entity), getattr(entity, "id", None)), None)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, entity: object) -> bool:
        with self._lock:
            return (type(entity), getattr(entity, "id", None)) in self._items


_cache = Cache()


def get_cache() -> Cache:
    """Get the process-wide entity cache."""
    return _cache
