"""
Route table loader configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys
from typing import Optional

from pydantic import Field

from routetable.common.core.config import BaseAppConfig


class RouteTableConfig(BaseAppConfig):
    """
    Configuration management for the route table loader.
    """

    # Route sources
    ROUTES_FILE_PATH: str = Field(
        default="/app/config/routes.json", description="Route definition file path"
    )
    ROUTES_FALLBACK_CONTENT: str = Field(
        default="[]", description="Inline route array used when the file is unavailable"
    )
    ROUTES_FILE_ENCODING: str = Field(
        default="utf-8-sig", description="Route file text encoding (a UTF-8 BOM is skipped)"
    )

    # Route store
    ROUTE_CACHE_MAX_SIZE: int = Field(default=999, ge=1, description="Max cached routes")
    ROUTE_CACHE_TTL_SECONDS: Optional[float] = Field(
        default=None, gt=0, description="Route expiry (seconds); unset means never expire"
    )


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = RouteTableConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
