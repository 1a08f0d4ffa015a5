"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .route import ConfiguredRoute, RouteLoadResult, RouteSource, SourceOrigin

__all__ = [
    "ConfiguredRoute",
    "RouteLoadResult",
    "RouteSource",
    "SourceOrigin",
]
