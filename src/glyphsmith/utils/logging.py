"""Logging utilities for Glyphsmith."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class StylizeStats:
    """Statistics from one stylization run.

    Point totals cover only strokes drawn from a simplified outline.
    """

    rendered_count: int = 0
    skipped_count: int = 0
    input_points: int = 0
    simplified_points: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate stylization duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def reduction(self) -> float:
        """Fraction of input points removed by simplification."""
        if self.input_points == 0:
            return 0.0
        return 1 - self.simplified_points / self.input_points


# Handlers installed on the root logger by configure_logging
_installed_handlers: list[logging.Handler] = []


def reset_logging() -> None:
    """Remove and close the handlers added by configure_logging."""
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers from a previous call are removed first, so repeated calls never
    stack duplicate output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    reset_logging()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("glyphsmith")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class StylizeLogger:
    """Logger for tracking per-stroke progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = StylizeStats()

    def log_stroke_rendered(
        self,
        stroke_idx: int,
        input_points: int,
        simplified_points: int | None,
    ) -> None:
        """Log a stroke that produced a path.

        Strokes whose path is not drawn from a simplification (simplified_points
        is None) count as rendered but stay out of the point totals.
        """
        self._logger.debug(
            "Stroke rendered",
            stroke=stroke_idx,
            points=input_points,
            simplified=simplified_points,
        )
        self._stats.rendered_count += 1
        if simplified_points is not None:
            self._stats.input_points += input_points
            self._stats.simplified_points += simplified_points

    def log_stroke_skipped(self, stroke_idx: int, reason: str) -> None:
        """Log a stroke that produced no path."""
        self._logger.debug("Stroke skipped", stroke=stroke_idx, reason=reason)
        self._stats.skipped_count += 1

    def log_sketch_complete(self, style: str) -> None:
        """Log the end of a stylization run."""
        self._logger.info(
            "Sketch stylized",
            style=style,
            rendered=self._stats.rendered_count,
            skipped=self._stats.skipped_count,
            reduction=round(self._stats.reduction, 3),
        )

    @property
    def stats(self) -> StylizeStats:
        """Get current stylization statistics."""
        return self._stats
