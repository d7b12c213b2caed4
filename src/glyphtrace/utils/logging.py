"""Logging utilities for Glyphtrace."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "glyphtrace"


@dataclass
class ExtractionStats:
    """Statistics from a series of extraction attempts."""

    extracted_count: int = 0
    empty_count: int = 0
    rejected_count: int = 0
    failed_count: int = 0
    points_traced: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def attempt_count(self) -> int:
        """Total number of extraction attempts."""
        return self.extracted_count + self.empty_count + self.rejected_count + self.failed_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces our handlers instead of stacking duplicates
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("glyphtrace")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ExtractionLogger:
    """Logger for tracking extraction outcomes and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("glyphtrace")
        self._stats = ExtractionStats()

    def log_extraction_start(self, width: int, height: int, threshold: int) -> None:
        """Log start of a trace over a natural-pixel region."""
        self._logger.debug(
            "Tracing region", width=width, height=height, threshold=threshold
        )

    def log_glyph_extracted(
        self,
        glyph_id: str,
        raw_points: int,
        kept_points: int,
        duration_ms: float,
    ) -> None:
        """Log a successfully extracted glyph."""
        self._logger.info(
            "Glyph extracted",
            glyph=glyph_id,
            raw_points=raw_points,
            points=kept_points,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.extracted_count += 1
        self._stats.points_traced += raw_points

    def log_empty_selection(self, raw_points: int) -> None:
        """Log a trace that produced no usable outline."""
        self._logger.debug("Nothing to extract", raw_points=raw_points)
        self._stats.empty_count += 1

    def log_selection_rejected(self, error: Exception) -> None:
        """Log a selection rejected before tracing."""
        self._logger.debug("Selection rejected", reason=str(error))
        self._stats.rejected_count += 1

    def log_trace_failed(self, error: Exception) -> None:
        """Log a trace that hit its safety bound."""
        self._logger.warning(
            "Trace failed",
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed_count += 1
        self._stats.errors.append((type(error).__name__, str(error)))

    @property
    def stats(self) -> ExtractionStats:
        """Get current extraction statistics."""
        return self._stats
