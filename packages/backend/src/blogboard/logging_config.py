"""structlog setup.

Learn: every module does `logger = structlog.get_logger()` and logs
dotted event names with key-value context. This function decides how
those events are rendered: a readable console line in development,
one JSON object per line when BLOGBOARD_LOG_JSON=true.
"""

import logging

import structlog

from blogboard.config import settings


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog processors and the stdlib root level."""
    level_name = (level or settings.log_level).upper()
    use_json = settings.log_json if json_logs is None else json_logs

    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logging.basicConfig(format="%(message)s", level=log_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=False,
    )

    # Quieter third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
