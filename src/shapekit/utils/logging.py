"""Logging utilities for Shapekit.

Library modules log through ``logging.getLogger(__name__)`` and only at
DEBUG level. Applications call :func:`configure_logging` to route those
records to a file and the console and to get a structlog logger of their
own.
"""

import logging
from dataclasses import dataclass, field

import structlog

from shapekit.config import LoggingConfig

_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


@dataclass
class QueryStats:
    """Counters collected while running CLI queries."""

    streams_walked: int = 0
    segments_emitted: int = 0
    boundary_hits: int = 0
    errors: list[str] = field(default_factory=list)


def _attach(handler: logging.Handler, level: str, fmt: str) -> None:
    handler.setLevel(getattr(logging, level.upper()))
    handler.setFormatter(logging.Formatter(fmt))
    logging.getLogger().addHandler(handler)


def configure_logging(
    config: LoggingConfig,
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Route library and CLI logs to the configured outputs.

    Args:
        config: Log file and level settings; no file handler is added when
            ``config.log_file`` is None
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    logging.getLogger().setLevel(logging.DEBUG)
    if config.log_file is not None:
        _attach(
            logging.FileHandler(config.log_file, encoding="utf-8"),
            config.file_log_level,
            _FILE_FORMAT,
        )
    if not quiet:
        _attach(logging.StreamHandler(), config.log_level, "%(message)s")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("shapekit")
    logger.info(
        "Logging initialized",
        log_file=str(config.log_file) if config.log_file else None,
        level=config.file_log_level,
    )
    return logger


class QueryLogger:
    """Logger for CLI queries that also keeps running counters."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = QueryStats()

    def log_stream(self, shape: str, segment_count: int, flattened: bool) -> None:
        """Log a fully walked segment stream."""
        self._logger.debug(
            "Stream walked",
            shape=shape,
            segments=segment_count,
            flattened=flattened,
        )
        self._stats.streams_walked += 1
        self._stats.segments_emitted += segment_count

    def log_query(self, shape: str, query: str, outcome: str) -> None:
        """Log a containment or intersection answer."""
        self._logger.info("Query answered", shape=shape, query=query, outcome=outcome)
        if outcome == "boundary":
            self._stats.boundary_hits += 1

    def log_error(self, shape: str, error: Exception) -> None:
        """Log a failed query."""
        self._logger.error(
            "Query failed",
            shape=shape,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.errors.append(str(error))

    @property
    def stats(self) -> QueryStats:
        """Get current query statistics."""
        return self._stats
