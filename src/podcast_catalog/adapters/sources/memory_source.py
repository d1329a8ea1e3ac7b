"""In-memory page source for tests and offline demos."""

import asyncio
from typing import Optional, Sequence

from podcast_catalog.core import Item, PageResult, PageSource, PageSourceError


class InMemoryPageSource(PageSource):
    """Serve pre-built pages, with optional failure injection.
    
    Pages past the last configured one are empty. ``gate`` lets a test hold
    fetches open to exercise overlapping calls.
    """
    
    name = "In-memory"
    
    def __init__(
        self,
        pages: Optional[Sequence[Sequence[Item]]] = None,
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.pages = [list(page) for page in pages or []]
        self.gate = gate
        self.failures: dict[int, PageSourceError] = {}
        self.calls: list[int] = []
    
    @classmethod
    def from_items(cls, items: Sequence[Item], page_size: int = 20) -> "InMemoryPageSource":
        """Slice a flat list into pages of ``page_size``."""
        pages = [items[i:i + page_size] for i in range(0, len(items), page_size)]
        return cls(pages)
    
    def fail_next(self, page: int, error: PageSourceError) -> None:
        """Make the next fetch of ``page`` raise ``error`` once."""
        self.failures[page] = error
    
    def call_count(self, page: int) -> int:
        return self.calls.count(page)
    
    async def fetch_page(self, page: int) -> PageResult:
        self.calls.append(page)
        if self.gate is not None:
            await self.gate.wait()
        
        error = self.failures.pop(page, None)
        if error is not None:
            raise error
        
        if page > len(self.pages):
            return PageResult(items=[], has_more_hint=False)
        return PageResult(items=list(self.pages[page - 1]), has_more_hint=page < len(self.pages))
