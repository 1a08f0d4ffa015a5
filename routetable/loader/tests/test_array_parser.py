"""
Tests for TolerantArrayParser.

Malformed elements are skipped without stopping the rest of the array.
"""

import logging
import sys

import pytest

from routetable.loader.core.exceptions import RouteStructureError
from routetable.loader.services.array_parser import TolerantArrayParser


@pytest.fixture
def parser():
    return TolerantArrayParser()


def _collect(parser, text):
    errors = []
    nodes = list(parser.parse(text, on_error=errors.append))
    return nodes, errors


def test_parses_every_element_in_order(parser):
    nodes, errors = _collect(
        parser,
        '[{"channel":"D2B","transaction":"9540"}, {"channel":"D2B","transaction":"9541"}]',
    )

    assert nodes == [
        {"channel": "D2B", "transaction": "9540"},
        {"channel": "D2B", "transaction": "9541"},
    ]
    assert errors == []


def test_empty_array(parser):
    assert _collect(parser, "  [ ]  ") == ([], [])


def test_nested_values_are_kept(parser):
    nodes, _ = _collect(
        parser, '[{"channel":"D2B","transaction":"9540","details":{"key":"value","l":[1,2]}}]'
    )

    assert nodes[0]["details"] == {"key": "value", "l": [1, 2]}


@pytest.mark.parametrize(
    "text",
    [
        '{"channel":"D2B","transaction":"9540"}',
        '"routes"',
        "42",
        "",
        "{channel:D2B,transaction:9540",
    ],
)
def test_non_array_raises_structure_error(parser, text):
    with pytest.raises(RouteStructureError, match="Expected an array"):
        parser.parse(text)


def test_malformed_element_is_skipped(parser, caplog):
    text = '[{"channel":"D2B","transaction":"9540"}, {"channel":}, {"channel":"D2B","transaction":"9541"}]'

    with caplog.at_level(logging.INFO, logger="routetable.array_parser"):
        nodes, errors = _collect(parser, text)

    assert [n["transaction"] for n in nodes] == ["9540", "9541"]
    assert len(errors) == 1
    assert errors[0].index == 1
    assert "Expecting value" in errors[0].message
    assert "Error reading route element 1" in caplog.text


def test_malformed_element_with_brackets_in_strings(parser):
    text = '[{"a": "x], {y", "b": }, {"channel":"C","transaction":"T"}]'

    nodes, errors = _collect(parser, text)

    assert nodes == [{"channel": "C", "transaction": "T"}]
    assert len(errors) == 1


def test_junk_after_element_is_an_element_error(parser):
    nodes, errors = _collect(parser, '[{"channel":"A","transaction":"1"} junk, {"channel":"B","transaction":"2"}]')

    assert nodes == [{"channel": "B", "transaction": "2"}]
    assert [e.index for e in errors] == [0]


def test_trailing_comma_reports_missing_element(parser):
    nodes, errors = _collect(parser, '[{"channel":"A","transaction":"1"},]')

    assert nodes == [{"channel": "A", "transaction": "1"}]
    assert [e.index for e in errors] == [1]


def test_unterminated_array_keeps_earlier_elements(parser, caplog):
    with caplog.at_level(logging.WARNING, logger="routetable.array_parser"):
        nodes, errors = _collect(parser, '[{"channel":"A","transaction":"1"}, {"channel":"B","transaction":}')

    assert nodes == [{"channel": "A", "transaction": "1"}]
    assert len(errors) == 1
    assert "not terminated" in caplog.text


def test_single_broken_element(parser):
    nodes, errors = _collect(parser, '[{"channel":"D2B","transaction":}')

    assert nodes == []
    assert len(errors) == 1


def test_content_after_array_is_ignored(parser):
    nodes, _ = _collect(parser, '[{"channel":"A","transaction":"1"}] trailing')

    assert nodes == [{"channel": "A", "transaction": "1"}]


def test_elements_are_produced_lazily(parser):
    elements = parser.parse('[{"channel":"A","transaction":"1"}, {"channel":"B","transaction":"2"}]')

    assert next(elements) == {"channel": "A", "transaction": "1"}
    assert next(elements) == {"channel": "B", "transaction": "2"}
    with pytest.raises(StopIteration):
        next(elements)


def test_parse_without_error_callback(parser):
    assert list(parser.parse("[1, }, 3]")) == [1, 3]


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"), reason="interpreter has no int digit limit"
)
def test_oversized_integer_element_is_skipped(parser):
    digits = "9" * (sys.get_int_max_str_digits() + 700)
    text = (
        f'[{{"channel":"D2B","transaction":"9540","n":{digits}}},'
        '{"channel":"D2B","transaction":"9541"}]'
    )

    nodes, errors = _collect(parser, text)

    assert nodes == [{"channel": "D2B", "transaction": "9541"}]
    assert [e.index for e in errors] == [0]


def test_deeply_nested_element_is_skipped(parser):
    depth = 100000
    text = "[" + "[" * depth + "]" * depth + ',{"channel":"D2B","transaction":"9541"}]'

    nodes, errors = _collect(parser, text)

    assert nodes == [{"channel": "D2B", "transaction": "9541"}]
    assert [e.index for e in errors] == [0]
