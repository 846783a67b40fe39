"""Logging setup for the application layer.

Standard library logging owns handlers, level and line format; structlog
events are rendered to key/value (or JSON) text and routed through it.
"""

import logging
from typing import Optional

import structlog

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Optional[str] = None, json_output: bool = False) -> None:
    """Configure stdlib logging and structlog.

    Args:
        level: Level name (DEBUG, INFO, ...); unknown names fall back to INFO
        json_output: Render structlog event payloads as JSON
    """
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("tdee_engine").setLevel(log_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.processors.KeyValueRenderer(key_order=["event"])
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
