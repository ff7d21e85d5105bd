"""
Billing structured logging setup

Structured logs via structlog:
- Event names with key/value context (subscriber_id, rule, total)
- JSON output for services, console rendering for local runs
- Routed through the standard library so uvicorn/pytest capture them
"""
from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog and the stdlib root logger."""
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    # basicConfig is a no-op once handlers exist (uvicorn, pytest)
    logging.getLogger().setLevel(log_level)


def get_logger(name: str):
    """Return a bound structlog logger for ``name``."""
    return structlog.get_logger(name)
