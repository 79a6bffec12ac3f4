"""Logging utilities for svg2librepcb."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers added to the root logger by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class ConversionStats:
    """Statistics from a conversion run."""

    path_count: int = 0
    segment_count: int = 0
    polygon_count: int = 0
    vertex_count: int = 0
    footprint_count: int = 0
    element_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate conversion duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by a previous call are removed first, so repeated
    configuration does not duplicate log lines.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svg2librepcb")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ConversionLogger:
    """Logger for tracking conversion progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def log_path_flattened(self, index: int, segments: int, polygons: int) -> None:
        """Log a parsed and flattened path element."""
        self._logger.debug("Path flattened", path=index, segments=segments, polygons=polygons)
        self._stats.path_count += 1
        self._stats.segment_count += segments
        self._stats.polygon_count += polygons

    def log_geometry(self, polygons: int, vertices: int, width: float, height: float) -> None:
        """Log the normalized geometry summary."""
        self._logger.info(
            "Geometry normalized",
            polygons=polygons,
            vertices=vertices,
            width=round(width, 3),
            height=round(height, 3),
        )
        self._stats.vertex_count = vertices

    def log_element_built(self, kind: str, uuid: str, supplied: bool) -> None:
        """Log a library element and where its UUID came from."""
        self._logger.debug(
            "Element built",
            kind=kind,
            uuid=uuid,
            uuid_source="supplied" if supplied else "generated",
        )
        self._stats.element_count += 1

    def log_footprints(self, layers: list[str]) -> None:
        """Log the generated footprint layers."""
        self._logger.info("Footprints generated", layers=layers)
        self._stats.footprint_count = len(layers)

    def log_element_written(self, path: Path) -> None:
        self._logger.debug("Element written", path=str(path))

    def log_conversion_error(self, source: str, error: Exception) -> None:
        """Log a conversion failure."""
        self._logger.error(
            "Conversion failed",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((source, str(error)))

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
