"""
Route table loader.

Resolves the route source, parses it tolerantly and stores every element
that validates and maps into a ConfiguredRoute.
"""

import asyncio
import json
import logging
from typing import Any, Iterator, Optional

from ..core.exceptions import ElementParseError, RouteMappingError, RouteStructureError
from ..core.route_key import route_key
from ..core.validation import is_valid_node
from ..models.route import RouteLoadResult, RouteSource, SourceOrigin
from .array_parser import TolerantArrayParser
from .route_mapper import RouteRecordMapper
from .route_store import RouteStoreProtocol
from .source_resolver import RouteSourceResolver

logger = logging.getLogger("routetable.route_loader")


class RouteTableLoader:
    def __init__(
        self,
        resolver: RouteSourceResolver,
        mapper: RouteRecordMapper,
        store: RouteStoreProtocol,
        parser: Optional[TolerantArrayParser] = None,
    ):
        """
        Args:
            resolver: Chooses between the route file and the fallback content
            mapper: Converts one element's JSON text into a route
            store: Receives every loaded route under its key
            parser: Array parser (default: TolerantArrayParser)
        """
        self.resolver = resolver
        self.mapper = mapper
        self.store = store
        self.parser = parser or TolerantArrayParser()

    def load(self) -> RouteLoadResult:
        """
        Load the route table into the store.

        Elements that fail to parse, validate or map are skipped and counted.

        Raises:
            RouteStructureError: neither source holds a JSON array
        """
        source = self.resolver.resolve()
        try:
            return self._load_source(source)
        except RouteStructureError as e:
            if source.origin != SourceOrigin.FILE:
                raise
            logger.info(
                f"Route file {source.path} is not a route array ({e}), "
                "falling back to configured routes"
            )
            return self._load_source(self.resolver.fallback())

    async def aload(self) -> RouteLoadResult:
        """Run load() in a worker thread."""
        return await asyncio.to_thread(self.load)

    def _load_source(self, source: RouteSource) -> RouteLoadResult:
        result = RouteLoadResult(origin=source.origin)
        if not source.text.strip():
            logger.warning(f"No route definitions configured ({source.origin.value})")
            return result

        # The structural check runs here, before any element reaches the store.
        elements = self._parse(source, result)
        for node in elements:
            self._fold_element(result, node)
        return result

    def _parse(self, source: RouteSource, result: RouteLoadResult) -> Iterator[Any]:
        def on_error(error: ElementParseError) -> None:
            result.parse_errors += 1

        return self.parser.parse(source.text, on_error=on_error)

    def _fold_element(self, result: RouteLoadResult, node: Any) -> RouteLoadResult:
        if not is_valid_node(node):
            logger.debug("Skipping route element without channel/transaction")
            result.invalid += 1
            return result

        try:
            json_text = json.dumps(node, separators=(",", ":"), ensure_ascii=False)
            route = self.mapper.map_element(json_text)
        except RouteMappingError as e:
            logger.info(f"Error mapping route element: {e}")
            result.mapping_errors += 1
            return result
        except Exception as e:
            logger.error(f"Unexpected error mapping route element: {e}", exc_info=True)
            result.mapping_errors += 1
            return result

        if route is None:
            result.unmapped += 1
            return result

        key = route_key(route)
        try:
            self.store.put(key, route)
        except Exception as e:
            logger.error(f"Error storing route {key}: {e}", exc_info=True)
            result.store_errors += 1
            return result

        logger.info(
            f"ROUTE LOADED - {key}",
            extra={"channel": route.channel, "transaction": route.transaction},
        )
        result.routes.append(route)
        return result
