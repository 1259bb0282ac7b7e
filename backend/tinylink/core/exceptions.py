"""Error types raised by the link store and link management workflow."""

from typing import Optional


class LinkError(Exception):
    """Base class for errors surfaced to API and page callers"""
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInput(LinkError):
    """Malformed URL or code"""
    status_code = 400
    message = "Invalid input"


class DuplicateCode(LinkError):
    """Code already taken, reported by the unique constraint"""
    status_code = 409
    message = "Code already exists"


class NotFound(LinkError):
    status_code = 404
    message = "Link not found"


class StoreError(LinkError):
    """Unexpected persistence failure. The message stays opaque to callers."""
    status_code = 500
    message = "Internal Server Error"
