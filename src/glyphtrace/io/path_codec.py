"""Path description reader and writer.

The path description is the textual form of a closed polygon: one ``M``
(move-to) command, any number of ``L`` (line-to) commands and an optional
closing ``Z``. Coordinates are separated by whitespace and/or commas and
several pairs may follow one command, in which case the extra pairs are
line-tos. Anything else, including relative (lowercase) commands and curve
commands, is rejected rather than approximated.

Example:
    >>> serialize_path([Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)])
    'M0 0L10 0L10 10L0 10Z'
"""

import math
import re

from glyphtrace.domain import Point
from glyphtrace.exceptions import PathParseError

_TOKEN_RE = re.compile(
    r"(?P<cmd>[A-Za-z])"
    r"|(?P<num>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
    r"|(?P<sep>[\s,]+)"
    r"|(?P<bad>.)",
    re.DOTALL,
)

_CLOSE_COMMANDS = ("Z", "z")


def format_number(value: float) -> str:
    """Format a coordinate compactly.

    Integral values print without a decimal point; others use the shortest
    representation that parses back to the same float.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot serialize non-finite coordinate {value!r}")
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def serialize_path(points: list[Point]) -> str:
    """Serialize a closed point sequence.

    Args:
        points: Ordered outline vertices

    Returns:
        ``M`` to the first point, ``L`` to each later point, then ``Z``;
        an empty string for no points
    """
    if not points:
        return ""

    parts = [f"M{format_number(points[0].x)} {format_number(points[0].y)}"]
    for point in points[1:]:
        parts.append(f"L{format_number(point.x)} {format_number(point.y)}")
    parts.append("Z")
    return "".join(parts)


def parse_path_description(description: str) -> list[Point]:
    """Parse a path description into outline points.

    Args:
        description: Text such as ``"M0 0L10 0L10 10L0 10Z"``

    Returns:
        Points in path order; empty for a blank description

    Raises:
        PathParseError: For unsupported commands, stray characters, a
            missing or repeated ``M``, odd coordinate counts, or content
            after the closing ``Z``
    """
    points: list[Point] = []
    command: str | None = None
    command_offset = 0
    coords: list[float] = []
    closed = False

    def flush() -> None:
        if command is None or command in _CLOSE_COMMANDS:
            return
        if not coords:
            raise PathParseError(
                description, f"'{command}' has no coordinates", command_offset
            )
        if len(coords) % 2:
            raise PathParseError(
                description,
                f"'{command}' has an odd number of coordinates ({len(coords)})",
                command_offset,
            )
        for i in range(0, len(coords), 2):
            points.append(Point(coords[i], coords[i + 1]))

    for match in _TOKEN_RE.finditer(description):
        kind = match.lastgroup
        text = match.group()
        offset = match.start()

        if kind == "sep":
            continue
        if kind == "bad":
            raise PathParseError(description, f"unexpected character {text!r}", offset)
        if closed:
            raise PathParseError(
                description, f"unexpected {text!r} after closing 'Z'", offset
            )

        if kind == "num":
            if command is None:
                raise PathParseError(
                    description, "coordinates before the first command", offset
                )
            coords.append(float(text))
            continue

        # Command letter
        flush()
        coords = []
        if text == "M":
            if command is not None:
                raise PathParseError(description, "only one 'M' command is allowed", offset)
        elif text == "L":
            if command is None:
                raise PathParseError(description, "path must start with 'M'", offset)
        elif text in _CLOSE_COMMANDS:
            if command is None:
                raise PathParseError(description, "path must start with 'M'", offset)
            closed = True
        else:
            raise PathParseError(description, f"unsupported command '{text}'", offset)
        command = text
        command_offset = offset

    flush()
    return points
