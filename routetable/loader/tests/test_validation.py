import pytest

from routetable.loader.core.validation import is_valid_node


def test_valid_node():
    assert is_valid_node({"channel": "D2B", "transaction": "9540"}) is True


def test_presence_is_enough():
    # Values are not checked here; the mapper rejects them later.
    assert is_valid_node({"channel": None, "transaction": ""}) is True


@pytest.mark.parametrize(
    "node",
    [
        None,
        {},
        {"channel": "D2B"},
        {"transaction": "9540"},
        {"invalid": True},
        ["channel", "transaction"],
        "channel",
        42,
    ],
)
def test_invalid_nodes(node):
    assert is_valid_node(node) is False
