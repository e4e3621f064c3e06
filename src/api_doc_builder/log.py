"""structlog setup for the command line tool.

The library itself only asks for loggers; configuring output is left to the
application, or to ``setup_logging`` when running the CLI.
"""

import logging
import sys
from typing import Any

import structlog

_CONFIGURED = False

# Silent until the application attaches handlers.
logging.getLogger("api_doc_builder").addHandler(logging.NullHandler())


def get_logger(name: str) -> Any:
    """structlog logger that writes through the stdlib logger ``name``."""
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def setup_logging(level: str | int = logging.WARNING, json_output: bool = False) -> None:
    """Configure structlog to write to stderr, once per process."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
    ]
    if json_output:
        processors.extend([structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()])
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True
