"""
Where: routetable/loader/main.py
What: Command line entry point that loads the route table and reports it.
Why: Check a route file or fallback string without starting a consumer.
"""

import argparse
import sys
from typing import Optional, Sequence

from .config import config as default_config
from .core.exceptions import RouteStructureError
from .core.logging_config import setup_logging
from .core.route_key import route_key
from .lifecycle import create_loader
from .services.route_store import RouteStore


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load the route table and list its routes.")
    parser.add_argument(
        "--file",
        default=default_config.ROUTES_FILE_PATH,
        help=f"Route file path (default: {default_config.ROUTES_FILE_PATH})",
    )
    parser.add_argument(
        "--fallback",
        default=default_config.ROUTES_FALLBACK_CONTENT,
        help="Route array JSON used when the file is unavailable.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full load result as JSON.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    route_config = default_config.model_copy(
        update={"ROUTES_FILE_PATH": args.file, "ROUTES_FALLBACK_CONTENT": args.fallback}
    )
    setup_logging(route_config)

    store = RouteStore(
        max_size=route_config.ROUTE_CACHE_MAX_SIZE,
        ttl_seconds=route_config.ROUTE_CACHE_TTL_SECONDS,
    )
    try:
        result = create_loader(route_config, store).load()
    except RouteStructureError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        for route in result.routes:
            print(route_key(route))
        print(
            f"{result.loaded} loaded, {result.skipped} skipped ({result.origin.value})",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
