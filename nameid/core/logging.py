from __future__ import annotations

import logging
import logging.config
import sys
from typing import Any

import structlog


def _select_renderer(json_output: bool | None) -> Any:
    if json_output is None:
        json_output = not sys.stderr.isatty()
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(log_level: str = "WARNING", *, json_output: bool | None = None) -> None:
    """Route structlog and stdlib logging to stderr; stdout carries derived identifiers only.

    Interactive terminals get the console renderer, anything else (pipes, files,
    CI capture) gets one JSON object per line unless ``json_output`` says otherwise.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "cli": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": _select_renderer(json_output),
                    "foreign_pre_chain": shared_processors,
                }
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": sys.stderr,
                    "formatter": "cli",
                }
            },
            "root": {"handlers": ["stderr"], "level": level},
        }
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
