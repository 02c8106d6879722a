"""
structlog setup shared by the API server and the CLI
"""

import logging
import secrets
import sys

import structlog

REQUEST_ID_KEY = "request_id"


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Render coloured console lines instead of one JSON object per event
        level: Level name such as "info"; defaults to DEBUG in debug mode, else INFO
    """
    if level is None:
        level = "DEBUG" if debug else "INFO"

    logging.basicConfig(level=level.upper(), stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def new_request_id() -> str:
    """Random 11-character urlsafe id."""
    return secrets.token_urlsafe(8)


def bind_request_id(request_id: str | None = None) -> str:
    """Attach a request id to every event logged in the current context.

    Returns:
        The bound id (a fresh one when none is given)
    """
    request_id = request_id or new_request_id()
    structlog.contextvars.bind_contextvars(**{REQUEST_ID_KEY: request_id})
    return request_id


def current_request_id() -> str | None:
    return structlog.contextvars.get_contextvars().get(REQUEST_ID_KEY)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
