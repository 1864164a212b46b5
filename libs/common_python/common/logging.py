"""Shared structured logging.

Services call `configure_logging()` once from their entrypoint. Application
code logs through structlog (`get_logger(__name__)`); records from plain
stdlib loggers (uvicorn, SQLAlchemy, pymongo) are routed through the same
renderer, so every line has the same shape:

    2024-09-08T17:02:11.412Z [info] request  [nfl_api.main] method=GET path=/api/teams request_id=3f2c... status=200

or, with `json_logs=True`, one JSON object per line.

Request correlation: the HTTP layer binds `request_id` with `log_context()`;
`merge_contextvars` copies it onto every event logged while the request runs.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Install one stdout handler on the root logger and route structlog through it.

    Safe to call more than once: previously installed handlers are replaced,
    so reloads (uvicorn --reload, tests) do not duplicate output.

    Args:
        level: Root log level name (e.g. "INFO", "DEBUG").
        json_logs: Emit JSON lines instead of the console format.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    renderer: Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
        render_chain: list[Processor] = [structlog.processors.format_exc_info, renderer]
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
        render_chain = [renderer]

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render_chain],
        )
    )

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(numeric_level)

    structlog.configure(
        processors=[*_shared_processors(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind key/value pairs onto every event logged from the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context(*keys: str) -> None:
    """Unbind `keys` from the logging context, or everything when none are given."""
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)
    else:
        structlog.contextvars.clear_contextvars()
