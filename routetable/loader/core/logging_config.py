from typing import Optional

from routetable.common.core.logging_config import setup_logging as common_setup_logging

from ..config import RouteTableConfig, config as default_config


def setup_logging(route_config: Optional[RouteTableConfig] = None):
    """
    Load the YAML config and initialize logging for the loader.
    """
    route_config = route_config or default_config
    common_setup_logging(route_config.LOG_CONFIG_PATH, level=route_config.LOG_LEVEL)
