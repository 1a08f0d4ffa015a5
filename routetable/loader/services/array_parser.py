"""
Where: routetable/loader/services/array_parser.py
What: Stream the elements of a top-level JSON array one at a time.
Why: A malformed element must not stop the remaining elements from loading.
"""

import json
import logging
import re
from typing import Any, Callable, Iterator, Optional

from ..core.exceptions import ElementParseError, RouteStructureError

logger = logging.getLogger("routetable.array_parser")

_WHITESPACE = re.compile(r"[ \t\n\r]*")

ParseErrorCallback = Callable[[ElementParseError], None]


class TolerantArrayParser:
    """
    Decodes a JSON array element by element.

    Malformed elements are logged, reported to `on_error` and skipped by
    resynchronising on the next top-level "," or "]".
    """

    def __init__(self):
        self._decoder = json.JSONDecoder()

    def parse(self, text: str, on_error: Optional[ParseErrorCallback] = None) -> Iterator[Any]:
        """
        Args:
            text: JSON text whose top-level value must be an array
            on_error: Called with each element parse failure

        Returns:
            Generator over the decoded elements, in array order

        Raises:
            RouteStructureError: the top-level value is not an array
        """
        pos = _skip_ws(text, 0)
        if not text.startswith("[", pos):
            raise RouteStructureError("Expected an array")
        return self._iter_elements(text, pos + 1, on_error)

    def _iter_elements(
        self, text: str, pos: int, on_error: Optional[ParseErrorCallback]
    ) -> Iterator[Any]:
        pos = _skip_ws(text, pos)
        if text.startswith("]", pos):
            return

        index = 0
        while True:
            pos = _skip_ws(text, pos)
            if pos >= len(text):
                logger.warning(f"Route array is not terminated after {index} element(s)")
                return

            error = None
            try:
                node, end = self._decoder.raw_decode(text, pos)
            except (ValueError, RecursionError) as e:
                # ValueError covers JSONDecodeError and the int digit limit.
                error = str(e)
                end = _skip_element(text, pos)
            else:
                end = _skip_ws(text, end)
                if end < len(text) and text[end] not in ",]":
                    error = f"Expecting ',' delimiter at char {end}"
                    end = _skip_element(text, end)

            if error is not None:
                logger.info(f"Error reading route element {index}: {error}")
                if on_error is not None:
                    on_error(ElementParseError(index, error))
            else:
                yield node

            pos = _skip_ws(text, end)
            if text.startswith(",", pos):
                pos += 1
                index += 1
            elif text.startswith("]", pos):
                return
            else:
                logger.warning(f"Route array is not terminated after {index + 1} element(s)")
                return


def _skip_ws(text: str, pos: int) -> int:
    return _WHITESPACE.match(text, pos).end()


def _skip_element(text: str, pos: int) -> int:
    """
    Return the position of the next "," or "]" outside strings and
    nested containers, or len(text) if there is none.
    """
    depth = 0
    in_string = False
    escaped = False
    for i in range(pos, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in "[{":
            depth += 1
        elif ch in "]}":
            if depth == 0:
                if ch == "]":
                    return i
            else:
                depth -= 1
        elif ch == "," and depth == 0:
            return i
    return len(text)
