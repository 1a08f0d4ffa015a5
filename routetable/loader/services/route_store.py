"""
Route Store - keyed in-memory cache of configured routes.

Populated once by the route table loader at startup and read by route
consumers afterwards.
"""

import logging
from typing import Any, List, Optional, Protocol

from cachetools import LRUCache, TTLCache

from ..models.route import ConfiguredRoute

logger = logging.getLogger("routetable.route_store")


class RouteStoreProtocol(Protocol):
    def put(self, key: str, route: ConfiguredRoute) -> Any: ...


class RouteStore:
    """
    Size-bounded route cache using cachetools.

    Note: Writes happen only from the loader's single pass, so no locking
    is required.
    """

    def __init__(self, max_size: int = 999, ttl_seconds: Optional[float] = None):
        """
        Initialize the store.

        Args:
            max_size: Maximum number of routes (default: 999)
            ttl_seconds: Time-to-live in seconds (default: None, never expire)
        """
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds

        if ttl_seconds is None:
            self._cache = LRUCache(maxsize=max_size)
        else:
            self._cache = TTLCache(maxsize=max_size, ttl=ttl_seconds)

        logger.debug(f"RouteStore initialized: max_size={max_size}, ttl={ttl_seconds}")

    def put(self, key: str, route: ConfiguredRoute) -> None:
        """
        Store a route, replacing any route already held under the key.

        Args:
            key: Route key ("<channel>-<transaction>")
            route: Route to store
        """
        if key in self._cache:
            logger.debug(f"Route key overwritten: {key}")
        self._cache[key] = route

    def get(self, key: str) -> Optional[ConfiguredRoute]:
        """
        Get a stored route.

        Returns:
            The route, or None if not found or expired
        """
        return self._cache.get(key)

    def invalidate(self, key: str) -> None:
        if key in self._cache:
            del self._cache[key]
            logger.debug(f"Route invalidated: {key}")

    def clear(self) -> None:
        """Clear all routes."""
        self._cache.clear()
        logger.debug("Route store cleared")

    def keys(self) -> List[str]:
        return list(self._cache.keys())

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: object) -> bool:
        return key in self._cache
