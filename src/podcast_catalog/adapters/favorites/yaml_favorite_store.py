"""Favorites persisted as a YAML list of ids."""

import logging
import threading
from pathlib import Path

import yaml

from podcast_catalog.core import FavoriteStore

logger = logging.getLogger(__name__)


class YamlFavoriteStore(FavoriteStore):
    """Store favorite ids in a single YAML file.
    
    The whole set is re-read on every call, so several stores pointing at the
    same file within one process agree. A missing, unreadable or malformed
    file is treated as an empty set.
    """
    
    KEY = "favorites"
    
    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = threading.Lock()
    
    def contains(self, item_id: str) -> bool:
        with self._lock:
            return item_id in self._load()
    
    def add(self, item_id: str) -> None:
        with self._lock:
            favorites = self._load()
            favorites.add(item_id)
            self._persist(favorites)
    
    def remove(self, item_id: str) -> None:
        with self._lock:
            favorites = self._load()
            favorites.discard(item_id)
            self._persist(favorites)
    
    def toggle(self, item_id: str) -> None:
        with self._lock:
            favorites = self._load()
            if item_id in favorites:
                favorites.remove(item_id)
            else:
                favorites.add(item_id)
            self._persist(favorites)
    
    def all(self) -> set[str]:
        """Return a copy of every favorite id."""
        with self._lock:
            return self._load()
    
    def _load(self) -> set[str]:
        if not self.path.exists():
            return set()
        
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Could not read favorites from %s, treating as empty: %s", self.path, e)
            return set()
        
        ids = data.get(self.KEY) if isinstance(data, dict) else None
        if not isinstance(ids, list):
            if data is not None:
                logger.warning("Unexpected favorites layout in %s, treating as empty", self.path)
            return set()
        
        return {value for value in ids if isinstance(value, str)}
    
    def _persist(self, favorites: set[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump({self.KEY: sorted(favorites)}, f, allow_unicode=True, default_flow_style=False)
