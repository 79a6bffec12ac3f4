"""Exception hierarchy for svg2librepcb."""


class Svg2LibrePcbError(Exception):
    """Base exception for all svg2librepcb errors."""

    pass


class ParseError(Svg2LibrePcbError):
    """Malformed SVG path data."""

    def __init__(self, data: str, position: int, expected: str) -> None:
        self.data = data
        self.position = position
        self.expected = expected
        found = repr(data[position]) if position < len(data) else "end of data"
        super().__init__(
            f"Invalid path data at offset {position}: expected {expected}, found {found}"
        )


class GeometryError(Svg2LibrePcbError):
    """Degenerate or unusable geometry."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigurationError(Svg2LibrePcbError):
    """Invalid or incomplete conversion configuration."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration for '{field}': {reason}")


class InvalidIdentityError(Svg2LibrePcbError):
    """A caller-supplied UUID is not in hyphenated hex form."""

    def __init__(self, value: str, slot: str | None = None) -> None:
        self.value = value
        self.slot = slot
        target = f" for {slot}" if slot else ""
        super().__init__(f"Invalid UUID{target}: '{value}'")


class LibraryIOError(Svg2LibrePcbError):
    """Errors related to reading input or writing library files."""

    pass


class SvgLoadError(LibraryIOError):
    """Error loading an SVG file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load SVG '{path}': {reason}")


class LibraryWriteError(LibraryIOError):
    """Error writing library elements to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write library element '{path}': {reason}")
