"""Structlog configuration for the columnate CLI.

Columnated text owns stdout, so every diagnostic is rendered to stderr,
either as console lines or (``--log-json``) one JSON object per event.
"""

from __future__ import annotations

import logging as std_logging
import sys

import structlog


def _level_from_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return std_logging.WARNING
    if verbosity == 1:
        return std_logging.INFO
    return std_logging.DEBUG


def _renderer(json_mode: bool) -> structlog.typing.Processor:
    if json_mode:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(json_mode: bool = False, verbosity: int = 0) -> None:
    """Route structlog and stdlib logging to stderr at a verbosity-derived level."""

    level = _level_from_verbosity(verbosity)
    handler = std_logging.StreamHandler(sys.stderr)
    handler.setFormatter(std_logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    std_logging.basicConfig(level=level, handlers=[handler], force=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _renderer(json_mode),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
