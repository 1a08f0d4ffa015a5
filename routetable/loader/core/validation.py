"""
Structural gate applied to parsed route elements before mapping.
"""

from typing import Any

CHANNEL = "channel"
TRANSACTION = "transaction"


def is_valid_node(node: Any) -> bool:
    """
    Check that an element carries the fields every route needs.

    Only presence is checked; values are left to the mapper.
    """
    return isinstance(node, dict) and CHANNEL in node and TRANSACTION in node
