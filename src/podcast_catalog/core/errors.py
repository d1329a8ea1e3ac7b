"""Classified failures raised by page sources.

Every failure a page source can hit is mapped to one of these classes at the
source boundary, so the repository and the UI only ever see this taxonomy.
``str(error)`` is the message shown to the user.
"""

from typing import Optional


class PageSourceError(Exception):
    """Base class for classified page source failures."""
    
    message = "Page source error"
    
    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class NoConnectivityError(PageSourceError):
    """No network path to the remote source."""
    
    message = "No internet connection"


class RequestTimeoutError(PageSourceError):
    """The request exceeded its deadline."""
    
    message = "Request timed out"


class ServerError(PageSourceError):
    """The remote answered with a non-success status code."""
    
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Server error: {status_code}")


class InvalidDataError(PageSourceError):
    """The response body could not be decoded into a page."""
    
    message = "Invalid data received"
    
    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__()


class BadRequestError(PageSourceError):
    """The request could not be constructed."""
    
    message = "Invalid request"
    
    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__()


class UnknownError(PageSourceError):
    """Anything not covered by the other kinds."""
    
    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"Unknown error: {description}")
