"""UI-facing adapters over the pagination repository."""

import html
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional

from bs4 import BeautifulSoup

from podcast_catalog.core import Item, RepositoryState
from podcast_catalog.repository import PaginationRepository

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description available."


class LoadingKind(str, Enum):
    """Which load, if any, is running."""

    NONE = "none"
    INITIAL = "initial"
    MORE = "more"


class ListPhase(str, Enum):
    """Observable phase of a list screen."""

    IDLE = "idle"
    LOADING_INITIAL = "loading_initial"
    LOADING_MORE = "loading_more"
    READY = "ready"
    EXHAUSTED = "exhausted"
    ERROR = "error"


@dataclass(frozen=True)
class ListState:
    """Everything a list screen needs to render."""

    items: tuple[Item, ...] = field(default_factory=tuple)
    is_loading_initial: bool = False
    is_loading_more: bool = False
    has_more: bool = True
    error_message: Optional[str] = None
    is_empty: bool = False

    @property
    def loading(self) -> LoadingKind:
        if self.is_loading_initial:
            return LoadingKind.INITIAL
        if self.is_loading_more:
            return LoadingKind.MORE
        return LoadingKind.NONE

    @property
    def can_retry(self) -> bool:
        return self.error_message is not None

    @property
    def phase(self) -> ListPhase:
        """Current phase of the list.

        A failed load with items on screen stays READY (or EXHAUSTED) and
        carries ``error_message`` alongside. Only a failure with nothing to
        show is ERROR.
        """
        if self.is_loading_initial:
            return ListPhase.LOADING_INITIAL
        if self.is_loading_more:
            return ListPhase.LOADING_MORE
        if not self.items:
            return ListPhase.ERROR if self.error_message is not None else ListPhase.IDLE
        return ListPhase.READY if self.has_more else ListPhase.EXHAUSTED


ListListener = Callable[[ListState], None]


class ListStateAdapter:
    """Mirror repository state for a list screen and drive pagination.

    Args:
        repository: Repository providing pagination and favorites.
        near_end_threshold: Rows from the end at which the next page is loaded.
    """

    def __init__(self, repository: PaginationRepository, near_end_threshold: int = 5) -> None:
        if near_end_threshold < 0:
            raise ValueError("near_end_threshold cannot be negative")
        self.repository = repository
        self.near_end_threshold = near_end_threshold
        self._state = ListState()
        self._listeners: list[ListListener] = []
        # Loading flags become visible while a load is still running
        self._unsubscribe_repository = repository.subscribe(self._apply)

    @property
    def state(self) -> ListState:
        return self._state

    def subscribe(self, listener: ListListener) -> Callable[[], None]:
        """Call ``listener`` with every newly published state."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def refresh(self) -> None:
        """Re-read the repository into the published state."""
        self._apply(self.repository.state)

    def close(self) -> None:
        """Stop following repository updates."""
        self._unsubscribe_repository()

    def _apply(self, repo_state: RepositoryState) -> None:
        error = repo_state.last_error
        self._set_state(ListState(
            items=repo_state.items,
            is_loading_initial=repo_state.is_loading_initial,
            is_loading_more=repo_state.is_loading_more,
            has_more=repo_state.has_more,
            error_message=str(error) if error is not None else None,
            is_empty=(
                not repo_state.is_loading_initial
                and not repo_state.items
                and error is None
            ),
        ))

    async def on_appear(self) -> None:
        """Load the first page when the screen appears."""
        self._set_state(replace(self._state, is_loading_initial=True, error_message=None, is_empty=False))
        await self.repository.load_initial()
        self.refresh()

    async def load_more_if_needed(self, item: Item, index: int) -> bool:
        """Load the next page when the row at ``index`` is near the end.

        ``index`` is the row's displayed position. The row is matched by
        position only, because the same id can appear on several pages.

        Returns:
            True if a page load was issued.
        """
        items = self._state.items
        if not 0 <= index < len(items) or items[index] != item:
            return False
        if not self._state.has_more or self._state.is_loading_more:
            return False

        trigger_index = max(len(items) - self.near_end_threshold, 0)
        if index < trigger_index:
            return False

        logger.debug("Row %d of %d reached, loading next page", index, len(items))
        await self.repository.load_more()
        self.refresh()
        return True

    async def retry_initial(self) -> None:
        """Retry the first page after an error."""
        self._set_state(replace(self._state, error_message=None))
        await self.repository.retry_initial()
        self.refresh()

    def toggle_favorite(self, item_id: str) -> None:
        self.repository.toggle_favorite(item_id)
        # Membership is not part of ListState; re-publish so badges redraw.
        self._notify()

    def is_favorite(self, item_id: str) -> bool:
        return self.repository.is_favorite(item_id)

    def _set_state(self, state: ListState) -> None:
        self._state = state
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("List state listener failed")


def clean_description(raw: Optional[str]) -> str:
    """Strip markup and decode entities from a podcast description.

    Returns a fallback text when nothing readable remains.
    """
    if raw is None or not raw.strip():
        return NO_DESCRIPTION

    text = BeautifulSoup(raw, "html.parser").get_text()
    # Entities without a trailing semicolon survive the parser.
    text = html.unescape(text).replace("\xa0", " ").strip()
    return text or NO_DESCRIPTION


class ItemDetailAdapter:
    """View-ready fields and favorite state for a single item."""

    def __init__(self, item: Item, repository: PaginationRepository) -> None:
        self.item = item
        self.repository = repository
        self.is_favorite = repository.is_favorite(item.id)

    @property
    def title(self) -> str:
        return self.item.title.strip()

    @property
    def publisher(self) -> str:
        return self.item.publisher.strip()

    @property
    def image(self) -> Optional[str]:
        """Large image when available, else the thumbnail."""
        return self.item.image or self.item.thumbnail

    @property
    def description_text(self) -> str:
        return clean_description(self.item.description)

    def toggle_favorite(self) -> None:
        self.repository.toggle_favorite(self.item.id)
        self.is_favorite = self.repository.is_favorite(self.item.id)
