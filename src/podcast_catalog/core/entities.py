"""Core domain entities."""

from dataclasses import dataclass, field
from typing import Optional

from podcast_catalog.core.errors import PageSourceError


@dataclass(frozen=True)
class Item:
    """A single podcast entry decoded from a page response."""
    
    id: str
    title: str
    publisher: str
    thumbnail: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    
    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("ID cannot be empty")
        if not self.title or not self.title.strip():
            raise ValueError("Title cannot be empty")


@dataclass
class PageResult:
    """One fetched page of items."""
    
    items: list[Item]
    has_more_hint: bool = False


@dataclass(frozen=True)
class RepositoryState:
    """Snapshot of the pagination repository, published after each mutation."""
    
    items: tuple[Item, ...] = field(default_factory=tuple)
    current_page: int = 0
    is_loading_initial: bool = False
    is_loading_more: bool = False
    has_more: bool = True
    last_error: Optional[PageSourceError] = None
