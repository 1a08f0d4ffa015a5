"""
Route record mapping.

Converts the JSON text of one array element into a ConfiguredRoute.
"""

from typing import Optional, Protocol

from pydantic import ValidationError

from ..core.exceptions import RouteMappingError
from ..models.route import ConfiguredRoute


class RouteRecordMapper(Protocol):
    def map_element(self, json_text: str) -> Optional[ConfiguredRoute]: ...


class PydanticRouteMapper:
    """Default mapper backed by the ConfiguredRoute model validation."""

    def map_element(self, json_text: str) -> Optional[ConfiguredRoute]:
        """
        Args:
            json_text: JSON object text of a single route element

        Returns:
            The validated route

        Raises:
            RouteMappingError: the element does not describe a valid route
        """
        try:
            return ConfiguredRoute.model_validate_json(json_text)
        except ValidationError as e:
            raise RouteMappingError(
                f"Invalid route definition: {e.error_count()} validation error(s): "
                f"{'; '.join(err['msg'] for err in e.errors())}",
                cause=e,
            ) from e
