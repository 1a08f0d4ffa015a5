"""
Route domain models.

Defines configured routes and the outcome of a route table load.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ConfiguredRoute(BaseModel):
    """
    A routable transaction definition.

    Fields other than channel/transaction (e.g. nested details) are kept
    as extras and passed through untouched.
    """

    model_config = ConfigDict(extra="allow")

    channel: str
    transaction: str


class SourceOrigin(str, Enum):
    FILE = "file"
    FALLBACK = "fallback"


class RouteSource(BaseModel):
    """Raw route array text and where it came from."""

    text: str
    origin: SourceOrigin
    path: Optional[str] = None


class RouteLoadResult(BaseModel):
    """
    Outcome of one route table load.

    Skipped elements are counted per reason; only routes that reached the
    store are listed, in array order.
    """

    origin: SourceOrigin
    routes: List[ConfiguredRoute] = Field(default_factory=list)
    invalid: int = 0
    parse_errors: int = 0
    mapping_errors: int = 0
    unmapped: int = 0
    store_errors: int = 0

    @computed_field
    @property
    def loaded(self) -> int:
        return len(self.routes)

    @computed_field
    @property
    def skipped(self) -> int:
        return (
            self.invalid
            + self.parse_errors
            + self.mapping_errors
            + self.unmapped
            + self.store_errors
        )
