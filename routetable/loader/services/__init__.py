"""
Services package.

Provides route source resolution, parsing, mapping, storage and loading.
"""

from .array_parser import TolerantArrayParser
from .route_loader import RouteTableLoader
from .route_mapper import PydanticRouteMapper, RouteRecordMapper
from .route_store import RouteStore, RouteStoreProtocol
from .source_resolver import RouteSourceResolver

__all__ = [
    "TolerantArrayParser",
    "RouteTableLoader",
    "PydanticRouteMapper",
    "RouteRecordMapper",
    "RouteStore",
    "RouteStoreProtocol",
    "RouteSourceResolver",
]
