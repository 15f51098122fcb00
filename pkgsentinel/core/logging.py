"""Logging setup: structlog events rendered through stdlib logging on stderr.

stdout is left to command output (tables, ``--json`` reports).
"""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

LOG_FORMATS = ("console", "json")


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def _stdlib_config(
    log_level: str,
    pre_chain: list[structlog.types.Processor],
    renderer: structlog.types.Processor,
) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "pkgsentinel": {
                "()": structlog.stdlib.ProcessorFormatter,
                "foreign_pre_chain": pre_chain,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    renderer,
                ],
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "pkgsentinel",
            },
        },
        "root": {"handlers": ["stderr"], "level": "WARNING"},
        "loggers": {"pkgsentinel": {"level": log_level}},
    }


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog on top of stdlib logging.

    Explicit arguments win over the environment:
        PKGSENTINEL_LOG_LEVEL  — pkgsentinel log level (default: INFO)
        PKGSENTINEL_LOG_FORMAT — console | json (default: console)

    Third-party loggers stay at WARNING.
    """
    log_level = (level or os.environ.get("PKGSENTINEL_LOG_LEVEL", "INFO")).upper()
    log_format = (log_format or os.environ.get("PKGSENTINEL_LOG_FORMAT", "console")).lower()

    processors = _shared_processors()
    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.config.dictConfig(_stdlib_config(log_level, processors, _renderer(log_format)))
