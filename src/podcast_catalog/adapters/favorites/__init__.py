"""Favorite store adapters."""

from podcast_catalog.adapters.favorites.memory_favorite_store import InMemoryFavoriteStore
from podcast_catalog.adapters.favorites.yaml_favorite_store import YamlFavoriteStore

__all__ = ["InMemoryFavoriteStore", "YamlFavoriteStore"]
