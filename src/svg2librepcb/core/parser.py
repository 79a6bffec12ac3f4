"""SVG path data parser.

Turns the contents of a ``d`` attribute into an ordered list of path
commands, and serializes command lists back into a canonical string.

Grammar notes:
- Numbers are separated by whitespace, a comma, a sign or a second
  decimal point (``10-5`` and ``.5.5`` are both two numbers).
- A command letter followed by several coordinate groups repeats the
  command. Extra groups after a moveto are linetos of the same relativity.
- Arc flags are single ``0``/``1`` characters and need no separator.
"""

import math
import re

from svg2librepcb.domain import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadraticCurveTo,
    SmoothCubicCurveTo,
    SmoothQuadraticCurveTo,
    VerticalLineTo,
)
from svg2librepcb.exceptions import ParseError

COMMANDS = set("MmZzLlHhVvCcSsQqTtAa")

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

WHITESPACE = " \t\r\n\f"


class _Scanner:
    """Cursor over path data that reports errors with their offset."""

    def __init__(self, data: str) -> None:
        self.data = data
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.data)

    def peek(self) -> str:
        return self.data[self.position]

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.peek() in WHITESPACE:
            self.position += 1

    def skip_separator(self) -> None:
        """Skip whitespace with at most one comma."""
        self.skip_whitespace()
        if not self.at_end() and self.peek() == ",":
            self.position += 1
            self.skip_whitespace()

    def at_number(self) -> bool:
        """Check whether a coordinate group can start here."""
        self.skip_separator()
        return not self.at_end() and NUMBER_RE.match(self.data, self.position) is not None

    def error(self, expected: str) -> ParseError:
        return ParseError(self.data, self.position, expected)

    def number(self) -> float:
        self.skip_separator()
        match = NUMBER_RE.match(self.data, self.position)
        if match is None:
            raise self.error("number")
        value = float(match.group())
        if not math.isfinite(value):
            raise self.error("finite number")
        self.position = match.end()
        return value

    def flag(self) -> bool:
        self.skip_separator()
        if self.at_end() or self.peek() not in "01":
            raise self.error("arc flag (0 or 1)")
        value = self.peek() == "1"
        self.position += 1
        return value

    def point(self) -> Point:
        x = self.number()
        y = self.number()
        return Point(x, y)


def _read_command(scanner: _Scanner, letter: str) -> PathCommand:
    """Read the arguments of one command."""
    relative = letter.islower()
    kind = letter.upper()

    if kind == "M":
        return MoveTo(scanner.point(), relative)
    if kind == "L":
        return LineTo(scanner.point(), relative)
    if kind == "H":
        return HorizontalLineTo(scanner.number(), relative)
    if kind == "V":
        return VerticalLineTo(scanner.number(), relative)
    if kind == "C":
        return CubicCurveTo(scanner.point(), scanner.point(), scanner.point(), relative)
    if kind == "S":
        return SmoothCubicCurveTo(scanner.point(), scanner.point(), relative)
    if kind == "Q":
        return QuadraticCurveTo(scanner.point(), scanner.point(), relative)
    if kind == "T":
        return SmoothQuadraticCurveTo(scanner.point(), relative)
    if kind == "A":
        rx = scanner.number()
        ry = scanner.number()
        rotation = scanner.number()
        large_arc = scanner.flag()
        sweep = scanner.flag()
        return ArcTo(rx, ry, rotation, large_arc, sweep, scanner.point(), relative)
    return ClosePath(relative)


def parse_path(data: str) -> list[PathCommand]:
    """Parse SVG path data into drawing commands.

    Args:
        data: Contents of a path ``d`` attribute

    Returns:
        Commands in source order. Empty data yields an empty list.

    Raises:
        ParseError: If the data is malformed

    Examples:
        >>> parse_path("M0,0 L10,0")
        [MoveTo(end=Point(x=0.0, y=0.0), relative=False), LineTo(end=Point(x=10.0, y=0.0), relative=False)]
    """
    scanner = _Scanner(data)
    commands: list[PathCommand] = []
    letter: str | None = None

    scanner.skip_whitespace()
    while not scanner.at_end():
        char = scanner.peek()

        if char in COMMANDS:
            letter = char
            scanner.position += 1
        elif char.isalpha():
            raise scanner.error("path command")
        elif letter is None:
            raise scanner.error("moveto command")
        elif letter in "Zz":
            # You can't have implicit commands after closing.
            raise scanner.error("path command")

        if not commands and letter not in "Mm":
            scanner.position -= 1
            raise scanner.error("moveto command")

        commands.append(_read_command(scanner, letter))

        # Implicit moveto repeats are treated as lineto commands.
        if letter == "M":
            letter = "L"
        elif letter == "m":
            letter = "l"

        if letter not in "Zz" and scanner.at_number():
            continue
        scanner.skip_separator()

    return commands


def _format_number(value: float) -> str:
    return repr(float(value))


def _format_point(point: Point) -> str:
    return f"{_format_number(point.x)} {_format_number(point.y)}"


def serialize_command(command: PathCommand) -> str:
    """Serialize one command with an explicit command letter."""
    letter = command.letter.lower() if command.relative else command.letter

    if isinstance(command, (MoveTo, LineTo, SmoothQuadraticCurveTo)):
        args = [_format_point(command.end)]
    elif isinstance(command, HorizontalLineTo):
        args = [_format_number(command.x)]
    elif isinstance(command, VerticalLineTo):
        args = [_format_number(command.y)]
    elif isinstance(command, CubicCurveTo):
        args = [
            _format_point(command.control1),
            _format_point(command.control2),
            _format_point(command.end),
        ]
    elif isinstance(command, SmoothCubicCurveTo):
        args = [_format_point(command.control2), _format_point(command.end)]
    elif isinstance(command, QuadraticCurveTo):
        args = [_format_point(command.control), _format_point(command.end)]
    elif isinstance(command, ArcTo):
        args = [
            _format_number(command.rx),
            _format_number(command.ry),
            _format_number(command.rotation),
            "1" if command.large_arc else "0",
            "1" if command.sweep else "0",
            _format_point(command.end),
        ]
    elif isinstance(command, ClosePath):
        args = []
    else:
        raise TypeError(f"Unknown path command: {command!r}")

    return " ".join([letter, *args])


def serialize_path(commands: list[PathCommand]) -> str:
    """Serialize commands into canonical path data.

    Every command gets its own letter and numbers are written with full
    float precision, so parsing the result gives back equal commands.
    """
    return " ".join(serialize_command(command) for command in commands)
