"""
Where: routetable/loader/lifecycle.py
What: Startup assembly of the route store.
Why: Build and populate the store once, before route consumers start.
"""

import logging
from typing import Optional

from .config import RouteTableConfig, config as default_config
from .services.route_loader import RouteTableLoader
from .services.route_mapper import PydanticRouteMapper, RouteRecordMapper
from .services.route_store import RouteStore
from .services.source_resolver import RouteSourceResolver

logger = logging.getLogger("routetable.lifecycle")


def create_loader(
    route_config: RouteTableConfig,
    store: RouteStore,
    mapper: Optional[RouteRecordMapper] = None,
) -> RouteTableLoader:
    resolver = RouteSourceResolver(
        file_path=route_config.ROUTES_FILE_PATH,
        fallback_content=route_config.ROUTES_FALLBACK_CONTENT,
        encoding=route_config.ROUTES_FILE_ENCODING,
    )
    return RouteTableLoader(resolver, mapper or PydanticRouteMapper(), store)


def build_route_store(
    route_config: Optional[RouteTableConfig] = None,
    mapper: Optional[RouteRecordMapper] = None,
) -> RouteStore:
    """
    Create the route store and populate it from the configured sources.

    Raises:
        RouteStructureError: neither the file nor the fallback holds a route array
    """
    route_config = route_config or default_config
    store = RouteStore(
        max_size=route_config.ROUTE_CACHE_MAX_SIZE,
        ttl_seconds=route_config.ROUTE_CACHE_TTL_SECONDS,
    )

    result = create_loader(route_config, store, mapper).load()
    logger.info(
        f"Loaded {result.loaded} routes (skipped {result.skipped}) from {result.origin.value}",
        extra={
            "invalid": result.invalid,
            "parse_errors": result.parse_errors,
            "mapping_errors": result.mapping_errors,
        },
    )
    return store
