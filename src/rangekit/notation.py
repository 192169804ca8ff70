"""Textual range notation for integer bounds.

``a..<b`` (half-open), ``a...b`` (closed), ``..<b``, ``...b``, ``a...`` and
``...`` (unbounded). Every range type renders itself in this notation through
``str()``.
"""

import re
from typing import Any

from rangekit.ranges.construct import (
    between,
    closed,
    from_,
    through,
    unbounded,
    up_to,
)
from rangekit.ranges.expression import RangeExpression

_INT = r"([+\-]?\d+)"
_PATTERNS: tuple[tuple[re.Pattern[str], Any], ...] = (
    (re.compile(rf"^{_INT}\.\.<{_INT}$"), between),
    (re.compile(rf"^{_INT}\.\.\.{_INT}$"), closed),
    (re.compile(rf"^\.\.<{_INT}$"), up_to),
    (re.compile(rf"^\.\.\.{_INT}$"), through),
    (re.compile(rf"^{_INT}\.\.\.$"), from_),
    (re.compile(r"^\.\.\.$"), unbounded),
)


def parse_range(text: str) -> RangeExpression[Any]:
    """Parse ``text`` into the matching range expression.

    Raises ValueError for text that is not range notation. Well-formed text
    with inverted bounds (``5..<3``) raises InvalidRangeError instead.
    """
    stripped = text.strip().replace(" ", "")
    for pattern, build in _PATTERNS:
        match = pattern.match(stripped)
        if match is not None:
            return build(*(int(group) for group in match.groups()))
    raise ValueError(
        f"Invalid range notation {text!r}: expected one of "
        "'A..<B', 'A...B', '..<B', '...B', 'A...', '...'"
    )


def format_range(expression: RangeExpression[Any]) -> str:
    return str(expression)
