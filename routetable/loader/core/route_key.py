"""
Where: routetable/loader/core/route_key.py
What: Build the store key for a configured route.
Why: Loader and route consumers must compute the exact same key.
"""

from ..models.route import ConfiguredRoute


def build_route_key(channel: str, transaction: str) -> str:
    """Return "<channel>-<transaction>" with no normalization."""
    return f"{channel}-{transaction}"


def route_key(route: ConfiguredRoute) -> str:
    return build_route_key(route.channel, route.transaction)
