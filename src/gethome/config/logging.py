"""structlog configuration for the ``gethome`` logger tree.

Only the ``gethome`` logger is touched: it gets a single stderr handler
and stops propagating, so the host application's root logger is left as
it was.  Records render as JSON lines with ``--log-json``, otherwise
through structlog's console renderer.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "gethome"


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``gethome`` log records to stderr.

    Args:
        verbose: Emit DEBUG records (each account lookup); otherwise WARNING+.
        log_json: Render one JSON object per line instead of console text.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
