"""
Structured logging for the scoreboard.

Loggers wrap standard library loggers, so events go wherever the
application routes `logging` records. Nothing is emitted until the
application installs a handler; main.py does so through setup_logging().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from live_scoreboard import config

PACKAGE_LOGGER = "live_scoreboard"

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(level: Optional[str] = None) -> None:
    log_level = getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO)

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        foreign_pre_chain=SHARED_PROCESSORS,
    )

    # stderr keeps the printed summary on stdout clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structured logger backed by logging.getLogger(name)."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
    )
