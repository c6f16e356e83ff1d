"""Logging configuration for qwen-translate."""

import sys
from typing import Any, List, Optional

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _build_processors(json: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(),
        ]
    return processors


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    """Configure structured logging on stderr.

    stdout is left to the translated text so the CLI can be piped.

    Args:
        level: One of ``LOG_LEVELS``, case-insensitive. Defaults to "INFO",
            which hides the adapter's debug events.
        json: Render one JSON object per line instead of console output.

    Raises:
        ValueError: If the level is unknown.
    """
    normalized = level.upper()
    if normalized not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level}'. Valid options: {', '.join(LOG_LEVELS)}"
        )

    structlog.configure(
        processors=_build_processors(json),
        wrapper_class=structlog.make_filtering_bound_logger(normalized),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structured logger, optionally named after its module."""
    return structlog.get_logger(name)
