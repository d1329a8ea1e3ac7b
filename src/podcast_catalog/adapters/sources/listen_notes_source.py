"""Listen Notes "best podcasts" page source."""

import logging
from typing import Any, Optional

import httpx

from podcast_catalog.core import (
    BadRequestError,
    InvalidDataError,
    Item,
    NoConnectivityError,
    PageResult,
    PageSource,
    PageSourceError,
    RequestTimeoutError,
    ServerError,
    UnknownError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://listen-api-test.listennotes.com/api/v2"


class ListenNotesPageSource(PageSource):
    """Fetch pages of best podcasts over HTTP."""
    
    name = "Listen Notes"
    
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
    
    async def fetch_page(self, page: int) -> PageResult:
        """Fetch one page and classify every failure."""
        if page < 1:
            raise BadRequestError(f"page must be positive, got {page}")
        
        logger.debug("Fetching %s page %d", self.name, page)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    f"{self.base_url}/best_podcasts",
                    headers=self._get_headers(),
                    params={"page": page},
                )
            
            if not 200 <= response.status_code < 300:
                raise ServerError(response.status_code)
            
            try:
                payload = response.json()
            except ValueError as e:
                raise InvalidDataError(f"response is not JSON: {e}") from e
            
            return self._parse_page(payload)
        except PageSourceError as e:
            logger.warning("Page %d failed: %s", page, e)
            raise
        except Exception as e:
            error = self._classify(e)
            logger.warning("Page %d failed: %s", page, error)
            raise error from e
    
    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["X-ListenAPI-Key"] = self.api_key
        return headers
    
    def _classify(self, error: Exception) -> PageSourceError:
        """Map a transport-level failure to the error taxonomy."""
        if isinstance(error, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
            return BadRequestError(str(error))
        if isinstance(error, httpx.TimeoutException):
            return RequestTimeoutError()
        if isinstance(error, httpx.ConnectError):
            return NoConnectivityError()
        return UnknownError(str(error) or error.__class__.__name__)
    
    def _parse_page(self, payload: Any) -> PageResult:
        """Decode a best_podcasts response body.
        
        A single malformed podcast fails the whole page.
        """
        if not isinstance(payload, dict):
            raise InvalidDataError("response body is not an object")
        
        podcasts = payload.get("podcasts")
        if not isinstance(podcasts, list):
            raise InvalidDataError("'podcasts' is missing or not a list")
        
        items = [self._parse_item(data) for data in podcasts]
        return PageResult(items=items, has_more_hint=bool(payload.get("has_next", False)))
    
    def _parse_item(self, data: Any) -> Item:
        if not isinstance(data, dict):
            raise InvalidDataError("podcast entry is not an object")
        
        for key in ("id", "title", "publisher"):
            if not isinstance(data.get(key), str):
                raise InvalidDataError(f"podcast field '{key}' is missing or not a string")
        
        try:
            return Item(
                id=data["id"],
                title=data["title"],
                publisher=data["publisher"],
                thumbnail=self._optional_str(data.get("thumbnail")),
                image=self._optional_str(data.get("image")),
                description=self._optional_str(data.get("description")),
            )
        except ValueError as e:
            raise InvalidDataError(str(e)) from e
    
    @staticmethod
    def _optional_str(value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None
