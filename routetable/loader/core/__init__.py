"""
Core logic package.

Provides the route key, the element validation gate and the error types.
"""

from .exceptions import (
    ElementParseError,
    RouteMappingError,
    RouteSourceUnavailableError,
    RouteStructureError,
    RouteTableError,
)
from .route_key import build_route_key, route_key
from .validation import is_valid_node

__all__ = [
    "ElementParseError",
    "RouteMappingError",
    "RouteSourceUnavailableError",
    "RouteStructureError",
    "RouteTableError",
    "build_route_key",
    "route_key",
    "is_valid_node",
]
