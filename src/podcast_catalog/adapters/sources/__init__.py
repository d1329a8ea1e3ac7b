"""Page source adapters."""

from podcast_catalog.adapters.sources.listen_notes_source import ListenNotesPageSource
from podcast_catalog.adapters.sources.memory_source import InMemoryPageSource

__all__ = ["ListenNotesPageSource", "InMemoryPageSource"]
