"""Core interfaces for adapters."""

from abc import ABC, abstractmethod

from podcast_catalog.core.entities import PageResult


class PageSource(ABC):
    """Interface for fetching numbered pages of items."""
    
    @abstractmethod
    async def fetch_page(self, page: int) -> PageResult:
        """Fetch a 1-based page.
        
        Raises:
            PageSourceError: on any failure, already classified.
        """
        pass


class FavoriteStore(ABC):
    """Interface for the durable set of favorite item ids."""
    
    @abstractmethod
    def contains(self, item_id: str) -> bool:
        """Check whether the id is a favorite."""
        pass
    
    @abstractmethod
    def add(self, item_id: str) -> None:
        """Add the id (idempotent)."""
        pass
    
    @abstractmethod
    def remove(self, item_id: str) -> None:
        """Remove the id (no-op if absent)."""
        pass
    
    @abstractmethod
    def toggle(self, item_id: str) -> None:
        """Flip membership of the id."""
        pass
