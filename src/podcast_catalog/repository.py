"""Pagination repository: aggregates pages and composes favorites."""

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Callable, Optional

from podcast_catalog.core import (
    FavoriteStore,
    Item,
    PageResult,
    PageSource,
    PageSourceError,
    RepositoryState,
    UnknownError,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[RepositoryState], None]


class PaginationRepository:
    """Owns the aggregated item list, the page cursor and the loading state.

    Load operations never raise. Failures end up in ``last_error`` and the
    previously loaded items are kept.

    Only one ``load_more`` fetch runs at a time. The in-flight marker is a
    ``concurrent.futures.Future`` claimed under a lock, so overlapping callers
    on other tasks, event loops or threads wait for the running fetch instead
    of issuing their own.
    """

    def __init__(self, source: PageSource, favorites: FavoriteStore) -> None:
        self.source = source
        self.favorites = favorites

        self._lock = threading.Lock()
        self._items: list[Item] = []
        self._current_page = 0
        self._is_loading_initial = False
        self._is_loading_more = False
        self._has_more = True
        self._last_error: Optional[PageSourceError] = None
        self._load_more_in_flight: Optional[Future] = None
        self._listeners: list[StateListener] = []

    # Read accessors

    @property
    def state(self) -> RepositoryState:
        """Consistent snapshot of every state field."""
        with self._lock:
            return self._snapshot()

    @property
    def items(self) -> tuple[Item, ...]:
        return self.state.items

    @property
    def current_page(self) -> int:
        return self.state.current_page

    @property
    def is_loading_initial(self) -> bool:
        return self.state.is_loading_initial

    @property
    def is_loading_more(self) -> bool:
        return self.state.is_loading_more

    @property
    def has_more(self) -> bool:
        return self.state.has_more

    @property
    def last_error(self) -> Optional[PageSourceError]:
        return self.state.last_error

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with the new state after every mutation.

        Returns:
            A callable that removes the listener.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # Loading

    async def load_initial(self) -> None:
        """Fetch page 1 and replace the aggregated list with it.

        A call made while another initial load is running returns at once
        without waiting.
        """
        with self._lock:
            if self._is_loading_initial:
                return
            self._is_loading_initial = True
            self._last_error = None
        self._publish()

        try:
            result, error = await self._fetch(1)
            with self._lock:
                if error is not None:
                    self._last_error = error
                else:
                    self._items = list(result.items)
                    self._current_page = 1
                    self._has_more = bool(result.items)
        finally:
            with self._lock:
                self._is_loading_initial = False
            self._publish()

        if error is not None:
            logger.warning("Initial load failed: %s", error)
        else:
            logger.debug("Initial load returned %d items", len(result.items))

    async def load_more(self) -> None:
        """Fetch the next page and append it.

        If a fetch is already running, wait for it to finish and return
        without fetching again.
        """
        with self._lock:
            if not self._has_more:
                return
            in_flight = self._load_more_in_flight
            if in_flight is None:
                claim: Future = Future()
                self._load_more_in_flight = claim
                self._is_loading_more = True
                self._last_error = None
                next_page = self._current_page + 1

        if in_flight is not None:
            await asyncio.shield(asyncio.wrap_future(in_flight))
            return

        self._publish()
        try:
            result, error = await self._fetch(next_page)
            with self._lock:
                if error is not None:
                    self._last_error = error
                else:
                    # Duplicates across pages are kept.
                    self._items.extend(result.items)
                    self._current_page = next_page
                    self._has_more = bool(result.items)
        finally:
            with self._lock:
                self._is_loading_more = False
                self._load_more_in_flight = None
            claim.set_result(None)
            self._publish()

        if error is not None:
            logger.warning("Loading page %d failed: %s", next_page, error)
        else:
            logger.debug("Page %d returned %d items", next_page, len(result.items))

    async def retry_initial(self) -> None:
        """Retry the initial load after an error."""
        await self.load_initial()

    # Favorites

    def is_favorite(self, item_id: str) -> bool:
        return self.favorites.contains(item_id)

    def toggle_favorite(self, item_id: str) -> None:
        self.favorites.toggle(item_id)

    # Internals

    async def _fetch(self, page: int) -> tuple[Optional[PageResult], Optional[PageSourceError]]:
        """Fetch a page, returning either the result or a classified error."""
        try:
            return await self.source.fetch_page(page), None
        except PageSourceError as e:
            return None, e
        except Exception as e:
            logger.exception("Page source raised an unclassified error for page %d", page)
            return None, UnknownError(str(e) or e.__class__.__name__)

    def _snapshot(self) -> RepositoryState:
        return RepositoryState(
            items=tuple(self._items),
            current_page=self._current_page,
            is_loading_initial=self._is_loading_initial,
            is_loading_more=self._is_loading_more,
            has_more=self._has_more,
            last_error=self._last_error,
        )

    def _publish(self) -> None:
        with self._lock:
            state = self._snapshot()
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(state)
            except Exception:
                logger.exception("State listener failed")
