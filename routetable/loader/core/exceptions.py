"""
Custom exception classes.

Represent errors raised while loading the route table.
"""

from typing import Optional


class RouteTableError(Exception):
    """Base exception class for route table loading."""

    pass


class RouteStructureError(RouteTableError):
    """Raised when the route payload is not a JSON array."""

    def __init__(self, detail: str = "Expected an array"):
        self.detail = detail
        super().__init__(detail)


class RouteSourceUnavailableError(RouteTableError):
    """Raised when the route file is missing or cannot be read."""

    def __init__(self, path: Optional[str], cause: Optional[Exception] = None):
        self.path = path
        self.cause = cause
        reason = f": {cause}" if cause is not None else ""
        super().__init__(f"Route file unavailable ({path}){reason}")


class ElementParseError(RouteTableError):
    """Raised when a single array element is not valid JSON."""

    def __init__(self, index: int, message: str):
        self.index = index
        self.message = message
        super().__init__(f"Element {index}: {message}")


class RouteMappingError(RouteTableError):
    """Raised by a mapper that cannot convert an element into a route."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)
