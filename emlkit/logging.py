"""Structured logging setup using structlog.

The parser modules log through ``structlog.get_logger()`` and never
configure output themselves.  Applications embedding emlkit may call
:func:`setup_logging` once at start-up to route those events somewhere.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def setup_logging(
    *,
    json: bool = True,
    level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Route structlog events through a single stdlib root handler.

    Records from plain ``logging`` loggers get the same level, logger name
    and timestamp keys as emlkit's own events.  Events below *level* are
    dropped before any rendering work is done.

    Parameters
    ----------
    json:
        If *True* (the default), output JSON lines.  If *False*, use the
        console renderer without colours.
    level:
        Root log level name, case-insensitive (``"debug"`` shows every
        skipped header line).
    stream:
        Destination stream; defaults to ``sys.stderr`` so parse events never
        mix with a program's own stdout.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderer: structlog.types.Processor
    if json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())
