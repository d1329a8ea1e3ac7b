"""In-memory favorites set."""

import threading
from typing import Iterable, Optional

from podcast_catalog.core import FavoriteStore


class InMemoryFavoriteStore(FavoriteStore):
    """Favorite ids kept in a process-local set."""
    
    def __init__(self, initial: Optional[Iterable[str]] = None) -> None:
        self._ids = set(initial or ())
        self._lock = threading.Lock()
    
    def contains(self, item_id: str) -> bool:
        with self._lock:
            return item_id in self._ids
    
    def add(self, item_id: str) -> None:
        with self._lock:
            self._ids.add(item_id)
    
    def remove(self, item_id: str) -> None:
        with self._lock:
            self._ids.discard(item_id)
    
    def toggle(self, item_id: str) -> None:
        with self._lock:
            if item_id in self._ids:
                self._ids.remove(item_id)
            else:
                self._ids.add(item_id)
    
    def all(self) -> set[str]:
        with self._lock:
            return set(self._ids)
